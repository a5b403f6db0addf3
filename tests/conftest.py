"""Shared test fixtures for volenv."""

from __future__ import annotations

from typing import Any

import pytest

from volenv.config import VolenvConfig

# ---------------------------------------------------------------------------
# In-memory winreg stand-in
# ---------------------------------------------------------------------------


class FakeKey:
    """Handle returned by ``FakeWinreg.CreateKeyEx`` / ``OpenKey``."""

    def __init__(self, registry: FakeWinreg, path: tuple[int, str], access: int) -> None:
        self.registry = registry
        self.path = path
        self.access = access
        self.closed = False

    def Close(self) -> None:
        self.closed = True

    def __enter__(self) -> FakeKey:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.Close()


class FakeWinreg:
    """Subset of the ``winreg`` module backed by a dict.

    ``deny_create`` makes ``CreateKeyEx`` raise ``PermissionError``;
    ``fail_write`` makes ``SetValueEx`` raise ``OSError``.
    """

    HKEY_CURRENT_USER = 0x80000001
    KEY_SET_VALUE = 0x0002
    KEY_QUERY_VALUE = 0x0001
    REG_SZ = 1

    def __init__(self) -> None:
        self.keys: dict[tuple[int, str], dict[str, tuple[Any, int]]] = {}
        self.handles: list[FakeKey] = []
        self.deny_create = False
        self.fail_write = False

    def CreateKeyEx(self, key: int, sub_key: str, reserved: int = 0, access: int = 0) -> FakeKey:
        if self.deny_create:
            raise PermissionError(5, "Access is denied")
        path = (key, sub_key)
        self.keys.setdefault(path, {})
        handle = FakeKey(self, path, access)
        self.handles.append(handle)
        return handle

    def OpenKey(self, key: int, sub_key: str, reserved: int = 0, access: int = 0) -> FakeKey:
        path = (key, sub_key)
        if path not in self.keys:
            raise FileNotFoundError(2, "The system cannot find the file specified")
        handle = FakeKey(self, path, access)
        self.handles.append(handle)
        return handle

    def SetValueEx(self, key: FakeKey, value_name: str, reserved: int, type: int, value: Any) -> None:
        if key.closed:
            raise OSError(6, "The handle is invalid")
        if not key.access & self.KEY_SET_VALUE:
            raise PermissionError(5, "Access is denied")
        if self.fail_write:
            raise OSError(1021, "Cannot create a stable subkey under a volatile parent key")
        if not isinstance(value, str):
            raise TypeError("Objects of type 'int' can not be used as string registry values")
        if "\x00" in value:
            raise ValueError("embedded null character")
        self.keys[key.path][value_name] = (value, type)

    def QueryValueEx(self, key: FakeKey, value_name: str) -> tuple[Any, int]:
        try:
            return self.keys[key.path][value_name]
        except KeyError:
            raise FileNotFoundError(2, "The system cannot find the file specified") from None

    def values(self, sub_key: str = "Volatile Environment") -> dict[str, tuple[Any, int]]:
        """Direct view of a key's values, for assertions."""
        return self.keys.get((self.HKEY_CURRENT_USER, sub_key), {})


# ---------------------------------------------------------------------------
# Broadcast doubles
# ---------------------------------------------------------------------------


class SpyBroadcaster:
    """Records ``broadcast()`` calls."""

    def __init__(self) -> None:
        self.calls = 0

    def broadcast(self) -> None:
        self.calls += 1


class RaisingBroadcaster:
    """A broadcaster that violates its contract by raising."""

    def broadcast(self) -> None:
        raise OSError("user32 went away")


class FakeSendMessage:
    """Stands in for ``SendMessageTimeoutW``; records arguments."""

    def __init__(self, result: int = 1) -> None:
        self.result = result
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> int:
        self.calls.append(args)
        return self.result


@pytest.fixture
def fake_winreg() -> FakeWinreg:
    """Provide an empty in-memory registry."""
    return FakeWinreg()


@pytest.fixture
def spy_broadcaster() -> SpyBroadcaster:
    """Provide a broadcaster that counts calls."""
    return SpyBroadcaster()


@pytest.fixture
def test_config() -> VolenvConfig:
    """Provide a config isolated from the developer's environment."""
    return VolenvConfig(_env_file=None, log_level="DEBUG")


@pytest.fixture
def raising_broadcaster() -> RaisingBroadcaster:
    """Provide a broadcaster whose ``broadcast()`` raises."""
    return RaisingBroadcaster()


@pytest.fixture
def make_send_message() -> type[FakeSendMessage]:
    """Factory fixture: build a fake ``SendMessageTimeoutW`` with a fixed result."""
    return FakeSendMessage
