#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GfaGraph v0.1.0

Pytest configuration and shared fixtures.

Author: GfaGraph Development Team
License: MIT - See LICENSE
"""

import pytest
from pathlib import Path
import tempfile
import shutil


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="gfagraph_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def simple_gfa():
    """Small GFA graph with interleaved S/L lines and a dangling link."""
    return (
        "H\tVN:Z:1.0\n"
        "S\tutg1\tACGTACGT\n"
        "L\tutg1\t+\tutg2\t-\t4M\tRC:i:3\n"
        "S\tutg2\t*\tLN:i:100\tRC:i:12\n"
        "S\tutg3\tGGCC\n"
        "L\tutg2\t-\tutg9\t+\t10M2I3D\n"
    )


@pytest.fixture
def simple_gfa_path(temp_output_dir, simple_gfa):
    """simple_gfa written to disk."""
    path = temp_output_dir / "simple.gfa"
    path.write_text(simple_gfa)
    return path

# GfaGraph v0.1.0
# Any usage is subject to this software's license.
