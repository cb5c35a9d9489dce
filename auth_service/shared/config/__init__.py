# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import AppConfig, StorageBackend, load_config

__all__ = ["AppConfig", "StorageBackend", "load_config"]
