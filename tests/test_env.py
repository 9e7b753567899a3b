"""
Tests for EnvReader.
"""

from vetter import EnvReader, Failure, Success, boolean, number, string

ENV = {
    "PORT": "8080",
    "DEBUG": " True ",
    "RATIO": "0.75",
    "NAME": "demo",
    "BAD": "not-a-number",
    "HUGE": "inf",
}


class TestGet:
    def test_missing_returns_default(self):
        env = EnvReader(ENV)
        assert env.get("MISSING", "fallback") == "fallback"
        assert env.get("MISSING", 3) == 3
        assert env.get("MISSING", True) is True

    def test_string(self):
        assert EnvReader(ENV).get("NAME", "x") == "demo"

    def test_int(self):
        env = EnvReader(ENV)
        assert env.get("PORT", 80) == 8080
        assert env.get("BAD", 80) == 80

    def test_float(self):
        env = EnvReader(ENV)
        assert env.get("RATIO", 1.0) == 0.75
        assert env.get("BAD", 1.0) == 1.0
        assert env.get("HUGE", 1.0) == 1.0

    def test_bool(self):
        env = EnvReader(ENV)
        assert env.get("DEBUG", False) is True
        assert env.get("PORT", False) is False
        assert env.get("NAME", True) is False

    def test_defaults_to_os_environ(self, monkeypatch):
        monkeypatch.setenv("VETTER_TEST_PORT", "9000")
        assert EnvReader().get("VETTER_TEST_PORT", 0) == 9000

    def test_sees_later_changes(self, monkeypatch):
        env = EnvReader()
        monkeypatch.setenv("VETTER_TEST_LATE", "1")
        assert env.get("VETTER_TEST_LATE", False) is True


class TestRead:
    def test_validates(self):
        env = EnvReader(ENV)
        assert env.read("PORT", number(maximum=65535)) == Success(8080)
        assert env.read("DEBUG", boolean()) == Success(True)

    def test_failure_uses_key(self):
        result = EnvReader(ENV).read("BAD", number())
        assert result == Failure("BAD must be a valid number")

    def test_missing(self):
        env = EnvReader(ENV)
        assert env.read("MISSING", string()) == Failure("MISSING is required")
        assert env.read("MISSING", string(default="x")) == Success("x")
