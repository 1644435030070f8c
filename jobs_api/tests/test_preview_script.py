"""Tests for the preview_articles CLI."""

import json

from scripts.preview_articles import main


def test_prints_feed_as_camel_case_json(jobs_db, capsys):
    jobs_db(id=1, title="Older", jobs_at_risk="100")
    jobs_db(id=2, title="Newer", jobs_at_risk="5000", affected_industry="Retail")

    assert main(["--limit", "1"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert [a["title"] for a in payload] == ["Newer"]
    assert payload[0]["insights"]["jobsAffected"] == 5000
    assert payload[0]["category"] == "Retail"


def test_single_article_not_found(jobs_db, capsys):
    jobs_db(id=1, title="Only")
    assert main(["--id", "99"]) == 1
    assert "not found" in capsys.readouterr().err


def test_invalid_id(jobs_db, capsys):
    assert main(["--id", "abc"]) == 2
