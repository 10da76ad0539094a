# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Adapter registration and lookup by target identifier."""

from __future__ import annotations

from typing import TypeVar

from airules.adapters.base import BaseAdapter
from airules.core.constants import TargetId
from airules.core.exceptions import UnknownTargetError

T = TypeVar("T", bound=BaseAdapter)


class AdapterRegistry:
    """Central registry of the known target adapters."""

    _adapters: dict[TargetId, type[BaseAdapter]] = {}

    @classmethod
    def register(cls, adapter_class: type[T]) -> type[T]:
        cls._adapters[adapter_class.descriptor.id] = adapter_class
        return adapter_class

    @classmethod
    def get(cls, target: str) -> BaseAdapter:
        try:
            adapter_class = cls._adapters[TargetId(target)]
        except (ValueError, KeyError):
            available = ", ".join(cls.available())
            raise UnknownTargetError(
                f"Unknown target: {target}. Available: {available}"
            ) from None
        return adapter_class()

    @classmethod
    def get_all(cls) -> list[BaseAdapter]:
        return [cls.get(target) for target in cls.available()]

    @classmethod
    def available(cls) -> list[str]:
        return [target.value for target in TargetId if target in cls._adapters]


def adapter(cls: type[T]) -> type[T]:
    """Decorator to register an adapter class."""
    return AdapterRegistry.register(cls)


def get_adapter(target: str) -> BaseAdapter:
    return AdapterRegistry.get(target)
