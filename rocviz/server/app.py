# rocviz/server/app.py: FastAPI app

from fastapi import FastAPI

from rocviz.server.roc_routes import router as roc_router

app = FastAPI(title="rocviz")

app.include_router(roc_router)          # /roc/curve, /roc/auc, /roc/ovr


@app.get("/")
def root():
    return {"ok": True, "msg": "rocviz running"}
