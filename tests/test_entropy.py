import re
import uuid

import pytest

from credkit.errors import CredkitError, EntropySourceError
from credkit.secure_random import entropy
from credkit.secure_random import SALT_LEN, UUID_LEN, format_uuid, new_uuid, read_entropy, salt

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


def _constant_source(value: int):  # noqa: ANN202
    def _read(n: int) -> bytes:
        return bytes([value]) * n

    return _read


def _short_source(n: int) -> bytes:
    return bytes(n - 1)


def _failing_source(n: int) -> bytes:
    raise OSError("entropy device unavailable")


def test_salt_has_fixed_length() -> None:
    assert SALT_LEN == 256
    assert len(salt()) == SALT_LEN


def test_successive_salts_differ() -> None:
    assert salt() != salt()


def test_salt_reads_from_given_source() -> None:
    assert salt(_constant_source(0xAB)) == b"\xab" * SALT_LEN


def test_salt_short_read_raises() -> None:
    with pytest.raises(EntropySourceError):
        salt(_short_source)


def test_salt_source_failure_raises_chained_error() -> None:
    with pytest.raises(EntropySourceError) as exc:
        salt(_failing_source)
    assert isinstance(exc.value, OSError)
    assert isinstance(exc.value, CredkitError)
    assert isinstance(exc.value.__cause__, OSError)


def test_read_entropy_returns_exactly_n_bytes() -> None:
    assert read_entropy(32) != read_entropy(32)
    assert len(read_entropy(0)) == 0
    assert read_entropy(4, lambda n: b"\x01" * (n + 3)) == b"\x01" * 4


def test_new_uuid_matches_v4_pattern() -> None:
    for _ in range(200):
        assert UUID_PATTERN.match(new_uuid())


def test_new_uuids_differ() -> None:
    assert new_uuid() != new_uuid()


@pytest.mark.parametrize("value", [0x00, 0xFF, 0x5A, 0xA5])
def test_new_uuid_sets_marker_bits(value: int) -> None:
    u = new_uuid(_constant_source(value))
    raw = bytes.fromhex(u.replace("-", ""))
    assert raw[8] >> 6 == 0b10
    assert raw[6] >> 4 == 0b0100
    assert UUID_PATTERN.match(u)


@pytest.mark.parametrize(
    "raw",
    [
        bytes(16),
        b"\xff" * 16,
        bytes(range(16)),
        bytes.fromhex("d2f0c6a98e3b11ee9c4b0242ac120002"),
    ],
)
def test_format_uuid_matches_standard_library(raw: bytes) -> None:
    assert format_uuid(raw) == str(uuid.UUID(bytes=raw, version=4))


def test_format_uuid_rejects_wrong_length() -> None:
    with pytest.raises(ValueError):
        format_uuid(bytes(UUID_LEN - 1))


def test_new_uuid_short_read_raises() -> None:
    with pytest.raises(EntropySourceError):
        new_uuid(_short_source)


def test_new_uuid_source_failure_raises() -> None:
    with pytest.raises(EntropySourceError):
        new_uuid(_failing_source)


def test_default_source_is_secrets_token_bytes(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    def _fake_token_bytes(n: int) -> bytes:
        calls.append(n)
        return b"\x07" * n

    monkeypatch.setattr(entropy.secrets, "token_bytes", _fake_token_bytes)

    assert salt() == b"\x07" * SALT_LEN
    assert new_uuid() == format_uuid(b"\x07" * UUID_LEN)
    assert calls == [SALT_LEN, UUID_LEN]
