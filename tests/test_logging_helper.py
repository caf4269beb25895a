from icsreport.logging_helper import Log


def test_prefixes_go_to_stderr(capsys):
    Log.section("Report")
    Log.info("hello")
    Log.warn("careful")
    Log.kv({"stage": "scan", "blocks": 2})
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.splitlines() == [
        "",
        "===== Report =====",
        "[INFO] hello",
        "[WARN] careful",
        "[KV] stage=scan | blocks=2",
    ]


def test_quiet_mode_keeps_warnings_and_errors(capsys):
    Log.set_verbose(False)
    Log.info("hidden")
    Log.debug("hidden")
    Log.warn("shown")
    Log.error("shown too")
    assert capsys.readouterr().err.splitlines() == ["[WARN] shown", "[ERROR] shown too"]


def test_log_file_receives_everything(tmp_path):
    Log.set_verbose(False)
    path = Log.open_file(tmp_path / "logs" / "run.log")
    assert Log.get_log_path() == str(path)
    Log.info("to file")
    Log.error("boom")
    Log.close_file()
    assert Log.get_log_path() is None
    assert path.read_text(encoding="utf-8").splitlines() == ["[INFO] to file", "[ERROR] boom"]
