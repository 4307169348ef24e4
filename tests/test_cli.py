import logging

import pandas

from fpg_cli import main


def write_csv(path, rows):
    pandas.DataFrame({"items": rows}).to_csv(path, index=False)
    return str(path)


def test_main_prints_tables(tmp_path, capsys):
    path = write_csv(tmp_path / "calls.csv", ["m1,m2,m3", "m1,m2", "m1,m3"])

    assert main([path, "--min-support", "2"]) == 0

    out = capsys.readouterr().out
    assert "Frequent Items (L1):" in out
    assert "Frequent Itemsets:" in out
    # {m1, m2} and {m1, m3}
    assert out.count("L2") == 2
    assert "L3" not in out


def test_main_logs_itemsets_per_level(tmp_path, caplog):
    path = write_csv(tmp_path / "calls.csv", ["m1,m2,m3", "m1,m2", "m1,m3"])

    with caplog.at_level(logging.INFO, logger="fpg"):
        assert main([path, "--min-support", "2"]) == 0

    assert "L1: 3 frequent itemsets" in caplog.text
    assert "L2: 2 frequent itemsets" in caplog.text


def test_main_percent_threshold(tmp_path, capsys):
    path = write_csv(tmp_path / "calls.csv", ["a,b", "a", "a,c", "b"])

    assert main([path, "--min-support-percent", "75"]) == 0

    out = capsys.readouterr().out
    assert out.count("L1") == 2
    assert "L2" not in out


def test_main_reports_bad_input(tmp_path):
    path = tmp_path / "calls.csv"
    pandas.DataFrame({"other": ["a"]}).to_csv(path, index=False)
    assert main([str(path)]) == 2
    assert main([str(tmp_path / "missing.csv")]) == 2
