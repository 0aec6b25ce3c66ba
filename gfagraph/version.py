#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GfaGraph v0.1.0

Version information.

Author: GfaGraph Development Team
License: MIT - See LICENSE
"""

__version__ = "0.1.0"

# GfaGraph v0.1.0
# Any usage is subject to this software's license.
