"""Tests for log redaction."""

from services.assessment.src.assessment.core.redaction import redact_dict, redact_value


def test_redact_value_returns_hash():
    result = redact_value("sensitive-data")
    assert result.startswith("REDACTED:")
    assert len(result) > 10


def test_redact_value_deterministic():
    assert redact_value("test") == redact_value("test")


def test_redact_dict_wire_keys():
    data = {
        "id": 1,
        "prenom": "Test",
        "nom": "TestNone",
        "dateNaissance": "1966-12-31",
        "genre": "F",
    }
    result = redact_dict(data)
    assert result["prenom"].startswith("REDACTED:")
    assert result["nom"].startswith("REDACTED:")
    assert result["dateNaissance"].startswith("REDACTED:")
    assert result["genre"] == "F"
    assert result["id"] == 1


def test_redact_dict_whole_address():
    data = {"adresse": {"numero": "1", "rue": "Brookside St"}}
    result = redact_dict(data)
    assert result["adresse"].startswith("REDACTED:")


def test_redact_dict_empty_value_is_none():
    assert redact_dict({"telephone": ""})["telephone"] is None


def test_redact_dict_nested():
    data = {"payload": {"last_name": "Doe", "note": "Poids stable"}}
    result = redact_dict(data)
    assert result["payload"]["last_name"].startswith("REDACTED:")
    assert result["payload"]["note"] == "Poids stable"


def test_redact_dict_phone_pattern_in_text():
    data = {"note": "Rappeler au 100-222-3333 demain"}
    result = redact_dict(data)
    assert "100-222-3333" not in result["note"]
    assert "[REDACTED]" in result["note"]
