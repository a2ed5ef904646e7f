import csv, os, time
from typing import Optional

HEADER = ["timestamp", "endpoint", "n", "n_points", "auc", "outcome"]


# one CSV row per evaluation so runs can be reported on later
def log_roc_run(path: str, endpoint: str, n: int, n_points: int,
                auc: Optional[float], outcome: str) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    row = [time.strftime("%Y-%m-%d %H:%M:%S"), endpoint, n, n_points,
           auc if auc is not None else "", outcome]
    write_header = not os.path.exists(path)
    with open(path, "a", newline="") as f:
        w = csv.writer(f)
        if write_header: w.writerow(HEADER)
        w.writerow(row)
