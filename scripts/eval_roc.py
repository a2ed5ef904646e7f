import sys, pathlib
import requests, numpy as np
from dotenv import load_dotenv, find_dotenv
from sklearn.datasets import make_classification
from sklearn.model_selection import train_test_split

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))
load_dotenv(find_dotenv())

from rocviz.config import base_url
from rocviz.lab.classifier import fit, score

URL = base_url() + "/roc/auc"
KINDS = ("logistic", "random_forest", "gradient_boosting", "svm")


def run_once(kind, n_points=100):
    X, y = make_classification(n_samples=400, n_features=8, weights=[0.7, 0.3], flip_y=0.05, random_state=None)
    Xtr, Xte, ytr, yte = train_test_split(X, y, test_size=0.3, stratify=y)
    m = fit(Xtr, ytr, {"kind": kind})
    p = score(m, Xte)
    r = requests.post(URL, json={"y_true": yte.tolist(), "y_score": p, "n_points": n_points})
    r.raise_for_status(); j = r.json()
    return j["grade"]["pass"], j["auc"], j["grade"]["reference_auc"]


def main(N=20):
    for kind in KINDS:
        passed = 0
        est, ref = [], []
        for _ in range(N):
            ok, a, b = run_once(kind)
            passed += ok
            est.append(a); ref.append(b)
        print(f"{kind:<18} runs={N}  within_tol={passed}  mean_grid_auc={np.mean(est):.3f}  mean_exact_auc={np.mean(ref):.3f}")

if __name__ == "__main__":
    main()
