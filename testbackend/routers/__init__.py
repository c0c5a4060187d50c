# -*- coding: utf-8 -*-
"""Location: ./testbackend/routers/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

FastAPI routers for the /mock and /util endpoint families.
"""
