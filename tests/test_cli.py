import json

from patch_report.__main__ import main
from patch_report.core.config import EMAIL_FOOTER, SECTION_HEADER_DEV


def _snapshot(tmp_path, data):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(data))
    return path


def test_cli_writes_report(tmp_path):
    snapshot = _snapshot(
        tmp_path,
        [
            {
                "key": "WSO2-9",
                "report_date": "2024-03-01",
                "patches": [{"name": "p-9", "lifecycle": "Development", "days_in_state": 2}],
            }
        ],
    )
    out = tmp_path / "report.html"
    code = main(
        [str(snapshot), "--audience", "customer", "--date", "2024-03-08", "--templates", str(tmp_path / "none.yaml"), "-o", str(out)]
    )
    assert code == 0
    body = out.read_text()
    assert "2024-03-08" in body
    assert SECTION_HEADER_DEV in body and "p-9" in body
    assert body.endswith(EMAIL_FOOTER)


def test_cli_stdout(tmp_path, capsys):
    snapshot = _snapshot(tmp_path, [])
    assert main([str(snapshot), "--date", "2024-03-08", "--templates", str(tmp_path / "none.yaml")]) == 0
    assert capsys.readouterr().out.endswith(EMAIL_FOOTER)


def test_cli_rejects_malformed_input(tmp_path, capsys):
    snapshot = _snapshot(tmp_path, [{"key": "A-1", "report_date": "2024-03-01", "patches": [{"name": "p", "lifecycle": "mystery"}]}])
    assert main([str(snapshot), "--strict", "--date", "2024-03-08"]) == 2
    assert "unrecognized lifecycle" in capsys.readouterr().err


def test_cli_rejects_non_list(tmp_path, capsys):
    snapshot = _snapshot(tmp_path, {"key": "A-1"})
    assert main([str(snapshot), "--date", "2024-03-08"]) == 2
    assert "JSON list" in capsys.readouterr().err


def test_cli_rejects_non_object_entries(tmp_path, capsys):
    bad_snapshots = [
        [1],
        [{"key": "A-1", "patches": ["p"]}],
        [{"key": "A-1", "patches": {"name": "p"}}],
    ]
    for index, data in enumerate(bad_snapshots):
        path = tmp_path / f"bad-{index}.json"
        path.write_text(json.dumps(data))
        assert main([str(path), "--date", "2024-03-08"]) == 2
        assert "Malformed record" in capsys.readouterr().err
