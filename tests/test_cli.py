#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GfaGraph v0.1.0

Tests for CLI command interface.

Author: GfaGraph Development Team
License: MIT - See LICENSE
"""

import pytest
from pathlib import Path
from click.testing import CliRunner
from gfagraph.cli import main


SAMPLE_GFA = (
    "H\tVN:Z:1.0\n"
    "S\tutg1\tACGTACGT\n"
    "L\tutg1\t+\tutg2\t-\t4M\n"
    "S\tutg2\t*\tLN:i:100\n"
)


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self):
        """Test that --help runs without error."""
        runner = CliRunner()
        result = runner.invoke(main, ['--help'])

        assert result.exit_code == 0
        assert 'GfaGraph' in result.output

    def test_cli_version(self):
        """Test that --version displays version."""
        runner = CliRunner()
        result = runner.invoke(main, ['--version'])

        assert result.exit_code == 0
        assert '0.1.0' in result.output

    def test_invalid_command(self):
        """Test that invalid commands are handled gracefully."""
        runner = CliRunner()
        result = runner.invoke(main, ['nonexistent_command'])

        assert result.exit_code != 0


class TestGfaCommands:
    """stats / rewrite / cigar."""

    def test_stats(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            Path('graph.gfa').write_text(SAMPLE_GFA)
            result = runner.invoke(main, ['stats', 'graph.gfa'])

            assert result.exit_code == 0
            assert 'Segments:      2' in result.output
            assert 'Links:         1' in result.output
            assert '108 bp' in result.output

    def test_stats_malformed(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            Path('bad.gfa').write_text("S\tutg1\tACGT\nL\tutg1\tx\tutg2\t+\t*\n")
            result = runner.invoke(main, ['stats', 'bad.gfa'])

            assert result.exit_code == 1
            assert 'line 2' in result.output

    def test_rewrite_groups_records(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            Path('graph.gfa').write_text(SAMPLE_GFA)
            result = runner.invoke(main, ['rewrite', 'graph.gfa', 'out.gfa'])

            assert result.exit_code == 0
            lines = Path('out.gfa').read_text().splitlines()
            assert [line[0] for line in lines] == ['H', 'S', 'S', 'L']

    def test_cigar(self):
        runner = CliRunner()
        result = runner.invoke(main, ['cigar', '10M2I3D'])

        assert result.exit_code == 0
        assert 'query\t12' in result.output
        assert 'reference\t13' in result.output
        assert 'alignment\t15' in result.output

    def test_cigar_malformed(self):
        runner = CliRunner()
        result = runner.invoke(main, ['cigar', 'M10'])

        assert result.exit_code == 1

    def test_config_policy_applied(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            Path('dup.gfa').write_text("S\ta\tAC\nS\ta\tACGT\n")
            Path('config.yaml').write_text("gfa:\n  duplicate_segment: overwrite\n")

            rejected = runner.invoke(main, ['stats', 'dup.gfa'])
            accepted = runner.invoke(main, ['--config', 'config.yaml', 'stats', 'dup.gfa'])

            assert rejected.exit_code == 1
            assert accepted.exit_code == 0
            assert 'Segments:      1' in accepted.output


class TestConfigCommands:

    def test_config_init_and_validate(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            result = runner.invoke(main, ['config', 'init', '--output', 'test_config.yaml'])
            assert result.exit_code == 0
            assert Path('test_config.yaml').exists()

            result = runner.invoke(main, ['config', 'validate', 'test_config.yaml'])
            assert result.exit_code == 0
            assert 'valid' in result.output

    def test_config_validate_rejects_bad_policy(self):
        runner = CliRunner()

        with runner.isolated_filesystem():
            Path('bad.yaml').write_text("gfa:\n  duplicate_header: sometimes\n")
            result = runner.invoke(main, ['config', 'validate', 'bad.yaml'])

            assert result.exit_code == 1

# GfaGraph v0.1.0
# Any usage is subject to this software's license.
