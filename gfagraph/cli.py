#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for GfaGraph.

Thin wrappers around GfaFile load/save: summary statistics, rewriting a
GFA file into grouped form, CIGAR extents, and configuration management.
"""

import logging
import sys
import click
from pathlib import Path

from .version import __version__
from .config.schema import load_config, save_config_template, validate_config
from .errors import GfaError
from .io.gfa_file import GfaFile, LoadPolicy
from .utils.cigar import cigar_extents


def _setup_logging(config, verbose, quiet):
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = getattr(logging, config['logging']['level'].upper(), logging.WARNING)

    logging.basicConfig(level=level, format=config['logging']['format'])


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              default=None, help='YAML configuration file')
@click.pass_context
def main(ctx, verbose, quiet, config_file):
    """
    GfaGraph: GFA assembly graph reader/writer

    Load, inspect and rewrite GFA segment/link graphs.
    """
    ctx.ensure_object(dict)

    try:
        config = load_config(Path(config_file) if config_file else None)
    except Exception as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)

    errors = validate_config(config)
    if errors:
        click.echo("✗ Configuration validation failed:", err=True)
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    _setup_logging(config, verbose, quiet)

    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet
    ctx.obj['CONFIG'] = config
    ctx.obj['POLICY'] = LoadPolicy.from_config(config)


# ============================================================================
# GFA Commands
# ============================================================================

@main.command('stats')
@click.argument('gfa_file', type=click.Path(exists=True))
@click.pass_context
def stats(ctx, gfa_file):
    """Print segment/link counts and total length of a GFA file."""
    try:
        gfa = GfaFile.from_path(gfa_file, policy=ctx.obj['POLICY'])
    except GfaError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    summary = gfa.stats()
    click.echo(f"File:          {gfa_file}")
    click.echo(f"Header:        {summary['header'] if summary['header'] is not None else '-'}")
    click.echo(f"Segments:      {summary['segments']}")
    click.echo(f"Links:         {summary['links']}")
    click.echo(f"Total length:  {summary['total_length']:,} bp")
    click.echo(f"No sequence:   {summary['placeholder_sequences']}")
    click.echo(f"Dangling:      {summary['dangling_links']}")


@main.command('rewrite')
@click.argument('input_gfa', type=click.Path(exists=True))
@click.argument('output_gfa', type=click.Path())
@click.pass_context
def rewrite(ctx, input_gfa, output_gfa):
    """Load INPUT_GFA and save it to OUTPUT_GFA grouped by record type."""
    try:
        gfa = GfaFile.from_path(input_gfa, policy=ctx.obj['POLICY'])
        gfa.save(output_gfa)
    except GfaError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    if not ctx.obj['QUIET']:
        click.echo(f"✓ Wrote {len(gfa.segments)} segments and {len(gfa.links)} links to {output_gfa}")


@main.command('cigar')
@click.argument('cigar')
def cigar(cigar):
    """Print query, reference and alignment length of a CIGAR string."""
    try:
        extents = cigar_extents(cigar)
    except GfaError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    click.echo(f"query\t{extents.query_length}")
    click.echo(f"reference\t{extents.reference_length}")
    click.echo(f"alignment\t{extents.align_length}")


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='gfagraph_config.yaml',
              help='Output configuration file path')
def config_init(output):
    """Generate a configuration file with the default load policies."""
    try:
        save_config_template(Path(output))
    except OSError as e:
        click.echo(f"✗ Error creating configuration: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Configuration file created: {output}")


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    try:
        config = load_config(Path(config_file))
    except Exception as e:
        click.echo(f"✗ Error validating configuration: {e}", err=True)
        sys.exit(1)

    errors = validate_config(config)
    if errors:
        click.echo("✗ Configuration validation failed:")
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")
    click.echo(f"  Duplicate header:    {config['gfa']['duplicate_header']}")
    click.echo(f"  Duplicate segment:   {config['gfa']['duplicate_segment']}")
    click.echo(f"  Unrecognized record: {config['gfa']['unrecognized_record']}")


if __name__ == '__main__':
    sys.exit(main())
