# -*- coding: utf-8 -*-
"""Location: ./testbackend/services/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Service layer: fake data generation, file browsing, memory allocation and system introspection.
"""
