"""Tests for the on/off devices: Light, SmartLock and GarageDoor."""

import copy

import pytest
from pydantic import ValidationError

from homedevices.models.devices import BaseDevice, GarageDoor, Light, SmartLock


# ── Light ──────────────────────────────────────────────────────────────


class TestLight:
    def test_starts_off(self) -> None:
        assert Light().is_on() is False

    def test_activate_turns_on(self) -> None:
        light = Light()
        light.activate()
        assert light.is_on() is True

    def test_deactivate_turns_off(self) -> None:
        light = Light()
        light.activate()
        light.deactivate()
        assert light.is_on() is False

    def test_round_trip_restores_initial_state(self) -> None:
        light = Light()
        before = light.model_copy()
        light.activate()
        light.deactivate()
        assert light == before

    def test_status_lines(self, status_lines) -> None:
        light = Light()
        light.activate()
        light.deactivate()
        assert status_lines() == ["Light is ON", "Light is OFF"]

    def test_is_active_follows_on(self) -> None:
        light = Light()
        assert light.is_active() is False
        light.activate()
        assert light.is_active() is True


# ── SmartLock ──────────────────────────────────────────────────────────


class TestSmartLock:
    def test_starts_locked(self) -> None:
        assert SmartLock().is_locked() is True

    def test_activate_unlocks(self) -> None:
        lock = SmartLock()
        lock.activate()
        assert lock.is_locked() is False

    def test_deactivate_locks(self) -> None:
        lock = SmartLock()
        lock.activate()
        lock.deactivate()
        assert lock.is_locked() is True

    def test_status_lines(self, status_lines) -> None:
        lock = SmartLock()
        lock.activate()
        lock.deactivate()
        assert status_lines() == ["Smart Lock is UNLOCKED", "Smart Lock is LOCKED"]

    def test_is_active_means_unlocked(self) -> None:
        lock = SmartLock()
        assert lock.is_active() is False
        lock.activate()
        assert lock.is_active() is True


# ── GarageDoor ─────────────────────────────────────────────────────────


class TestGarageDoor:
    def test_starts_closed(self) -> None:
        assert GarageDoor().is_open() is False

    def test_activate_opens(self) -> None:
        door = GarageDoor()
        door.activate()
        assert door.is_open() is True

    def test_deactivate_closes(self) -> None:
        door = GarageDoor()
        door.activate()
        door.deactivate()
        assert door.is_open() is False

    def test_status_lines(self, status_lines) -> None:
        door = GarageDoor()
        door.activate()
        door.deactivate()
        assert status_lines() == ["Garage Door is OPEN", "Garage Door is CLOSED"]

    def test_deactivate_when_closed_stays_closed(self) -> None:
        door = GarageDoor()
        door.deactivate()
        assert door.is_open() is False


# ── Value semantics ────────────────────────────────────────────────────


class TestValueSemantics:
    @pytest.mark.parametrize("device_class", [Light, SmartLock, GarageDoor])
    def test_copy_does_not_share_state(self, device_class: type[BaseDevice]) -> None:
        original = device_class()
        duplicate = copy.copy(original)

        duplicate.activate()

        assert duplicate.is_active() is True
        assert original.is_active() is False

    def test_model_copy_carries_state(self) -> None:
        light = Light()
        light.activate()
        assert light.model_copy().is_on() is True

    @pytest.mark.parametrize(
        ("device_class", "field", "value"),
        [(Light, "on", True), (SmartLock, "locked", False), (GarageDoor, "open", True)],
    )
    def test_state_cannot_be_assigned_directly(self, device_class: type[BaseDevice], field: str, value: bool) -> None:
        device = device_class()
        before = getattr(device, field)
        with pytest.raises(ValidationError):
            setattr(device, field, value)
        assert getattr(device, field) == before
        assert device.is_active() is False

    def test_unknown_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GarageDoor(ajar=True)  # pyright: ignore[reportCallIssue]

    def test_base_device_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            BaseDevice()  # pyright: ignore[reportAbstractUsage]
