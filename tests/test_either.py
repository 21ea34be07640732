"""
Tests para el tipo resultado (Failure / Success)
"""
from app.either import Failure, Success

def test_failure_is_failure():
    result = Failure.create({"message": "error"})
    assert result.is_failure() is True
    assert result.is_success() is False
    assert result.value == {"message": "error"}

def test_success_is_not_failure():
    result = Success.create({"animals": []})
    assert result.is_failure() is False
    assert result.is_success() is True
    assert result.value == {"animals": []}

def test_success_with_falsy_value_is_still_success():
    """El discriminador no depende del contenido del valor"""
    assert Success.create(None).is_failure() is False
    assert Failure.create(None).is_failure() is True
