"""Tests for the onetime command-line entry point."""

import pytest

from main import main

RFC_SECRET_B32 = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
RFC_SECRET_ASCII = "12345678901234567890"


# ── HOTP ──────────────────────────────────────────────────────────────────────

def test_hotp_generate(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["hotp", RFC_SECRET_B32, "--counter", "0"]) == 0
    assert capsys.readouterr().out.strip() == "755224"


def test_hotp_generate_ascii_secret(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["hotp", "--ascii", RFC_SECRET_ASCII, "--counter", "9"]) == 0
    assert capsys.readouterr().out.strip() == "520489"


def test_hotp_generate_grouped(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["hotp", RFC_SECRET_B32, "--counter", "1", "--group"]) == 0
    assert capsys.readouterr().out.strip() == "287 082"


def test_hotp_verify_with_skew(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(
        ["hotp", RFC_SECRET_B32, "--counter", "0", "--window", "1", "--verify", "287 082"]
    )
    assert code == 0
    assert capsys.readouterr().out.strip() == "valid (skew +1)"


def test_hotp_verify_invalid(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["hotp", RFC_SECRET_B32, "--counter", "0", "--verify", "000000"]) == 1
    assert capsys.readouterr().out.strip() == "invalid"


# ── TOTP ──────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "algorithm,secret,expected",
    [
        ("sha1", "12345678901234567890", "94287082"),
        ("SHA256", "12345678901234567890123456789012", "46119246"),
    ],
)
def test_totp_generate(
    capsys: pytest.CaptureFixture[str], algorithm: str, secret: str, expected: str
) -> None:
    argv = ["totp", "--ascii", secret, "--algorithm", algorithm, "--digits", "8", "--time", "59"]
    assert main(argv) == 0
    assert capsys.readouterr().out.strip() == expected


def test_totp_verify(capsys: pytest.CaptureFixture[str]) -> None:
    argv = [
        "totp", "--ascii", RFC_SECRET_ASCII, "--digits", "8",
        "--time", "119", "--window", "2", "--verify", "94287082",
    ]
    assert main(argv) == 0
    assert capsys.readouterr().out.strip() == "valid (skew -2)"


def test_totp_uses_current_time(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["totp", RFC_SECRET_B32]) == 0
    out = capsys.readouterr().out.strip()
    assert len(out) == 6 and out.isdigit()


# ── Errors ────────────────────────────────────────────────────────────────────

def test_invalid_digits_reported(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["hotp", RFC_SECRET_B32, "--counter", "0", "--digits", "10"]) == 2
    assert "Digits" in capsys.readouterr().err


def test_invalid_offset_reported(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["hotp", RFC_SECRET_B32, "--counter", "0", "--offset", "16"]) == 2
    assert "Offset" in capsys.readouterr().err


def test_invalid_secret_reported(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["hotp", "not-base32!", "--counter", "0"]) == 2
    assert "base32" in capsys.readouterr().err


def test_unknown_algorithm_is_usage_error() -> None:
    with pytest.raises(SystemExit) as info:
        main(["hotp", RFC_SECRET_B32, "--counter", "0", "--algorithm", "md5"])
    assert info.value.code == 2
