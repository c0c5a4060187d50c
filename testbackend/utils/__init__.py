# -*- coding: utf-8 -*-
"""Location: ./testbackend/utils/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Small helpers shared by routers and services.
"""
