# -*- coding: utf-8 -*-
"""Location: ./testbackend/middleware/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

HTTP middleware for the test backend.
"""
