# -*- coding: utf-8 -*-
"""Location: ./testbackend/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Test Backend Service - a FastAPI backend producing deterministic fake data and
diagnostic utilities for exercising clients, proxies and load tests.
"""

__copyright__ = "Copyright 2025"
__license__ = "Apache 2.0"
__version__ = "1.0.0"
__description__ = "Fake data and diagnostic endpoints for HTTP test harnesses"
__packages__ = ["testbackend"]
