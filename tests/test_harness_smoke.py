import csv
import json

from wordletips.harness import run_batch, run_case, summarize, write_csv, write_manifest
from wordletips.session import SessionConfig

WORDS = ["crane", "raise", "stare", "trace", "cared", "adieu", "alone", "slate"]


def test_run_case_smoke():
    r = run_case("crane", WORDS)
    assert "success" in r and "history" in r
    # Should solve within 6 in this tiny set
    assert r["success"] is True
    assert r["history"][-1] == ("crane", "+++++")


def test_run_case_answer_outside_pool():
    r = run_case("zebra", WORDS)
    assert r["success"] is False
    assert r["outcome"] == "empty_pool"


def test_run_batch_sample_and_summary():
    results = run_batch(WORDS, WORDS, sample=4)
    assert [r["answer"] for r in results] == WORDS[:4]
    s = summarize(results)
    assert s["cases"] == 4 and s["wins"] == 4 and s["win_rate"] == 1.0
    assert s["outcomes"] == {"solved": 4}


def test_run_batch_every_answer_in_pool_is_found():
    results = run_batch(WORDS, WORDS, config=SessionConfig(max_rounds=6))
    assert all(r["success"] for r in results)


def test_write_csv_and_manifest(tmp_path):
    results = run_batch(["crane", "slate"], WORDS)
    out = write_csv(results, str(tmp_path / "r" / "bench.csv"), max_rounds=6, N=5)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [row["answer"] for row in rows] == ["crane", "slate"]
    assert rows[0]["resp_1"] == "'+++++"
    assert rows[0]["guess_6"] == ""

    m = write_manifest({"summary": summarize(results)}, str(tmp_path / "m.json"))
    assert json.loads(open(m, encoding="utf-8").read())["summary"]["cases"] == 2
