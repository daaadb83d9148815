#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for ReadsAnalyzer.

This module provides the main CLI entry point and all subcommands:
k-mer abundance analysis and overlap graph assembly of a read file.
"""

import sys
import click
from pathlib import Path
import yaml

from .version import __version__
from .config.parser import ConfigParser, ConfigValidationError
from .config.schema import load_config, save_config_template, validate_config
from .utils.pipeline import ReadsAnalyzer, configure_logging


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    ReadsAnalyzer: k-mer abundance and overlap graph assembly of short reads.
    """
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet


def _load_checked_config(ctx, config_file, overrides):
    """Load configuration, apply CLI overrides, configure logging, validate."""
    try:
        parser = ConfigParser(config_file)
    except (OSError, ConfigValidationError) as e:
        click.echo(f"✗ Error loading configuration: {e}", err=True)
        ctx.exit(1)

    parser.merge_cli_overrides(overrides)
    config = parser.to_dict()

    errors = validate_config(config)
    if errors:
        click.echo("✗ Configuration validation failed:", err=True)
        for error in errors:
            click.echo(f"  • {error}", err=True)
        ctx.exit(1)

    level = config['output']['logging']['level']
    if ctx.obj.get('VERBOSE'):
        level = 'DEBUG'
    elif ctx.obj.get('QUIET'):
        level = 'ERROR'
    configure_logging(level, config['output']['logging']['log_file'])

    return config


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='readsanalyzer_config.yaml',
              help='Output configuration file path')
def config_init(output):
    """Generate a template configuration file with all available parameters."""
    click.echo(f"Generating configuration template: {output}")

    try:
        save_config_template(Path(output))
        click.echo(f"✓ Configuration file created: {output}")
    except OSError as e:
        click.echo(f"✗ Error creating configuration: {e}", err=True)
        sys.exit(1)


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        config = load_config(Path(config_file))
    except yaml.YAMLError as e:
        click.echo(f"✗ Error validating configuration: {e}", err=True)
        sys.exit(1)

    errors = validate_config(config)
    if errors:
        click.echo("\n✗ Configuration validation failed:")
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")
    click.echo("\nKey Settings:")
    click.echo(f"  K-mer size: {config['kmers']['kmer_size']}")
    click.echo(f"  Minimum overlap: {config['overlap_graph']['min_overlap']}")
    click.echo(f"  Assembly output: {config['output']['assembly_path']}")


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True))
@click.option('--format', '-f', type=click.Choice(['yaml', 'summary']), default='summary',
              help='Output format')
def config_show(config_file, format):
    """Display configuration settings."""
    try:
        config = load_config(Path(config_file))
    except yaml.YAMLError as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)

    if format == 'yaml':
        click.echo(yaml.dump(config, default_flow_style=False, sort_keys=False))
        return

    click.echo(f"Configuration from: {config_file}")
    click.echo("=" * 60)
    click.echo("\nK-mer Table:")
    click.echo(f"  Enabled: {config['kmers']['enabled']}")
    click.echo(f"  K-mer size: {config['kmers']['kmer_size']}")
    click.echo("\nOverlap Graph:")
    click.echo(f"  Enabled: {config['overlap_graph']['enabled']}")
    click.echo(f"  Minimum overlap: {config['overlap_graph']['min_overlap']}")
    click.echo("\nOutput:")
    click.echo(f"  Assembly: {config['output']['assembly_path']}")
    click.echo(f"  GFA: {config['output']['gfa_path']}")
    click.echo(f"  Log level: {config['output']['logging']['level']}")


# ============================================================================
# Analysis Commands
# ============================================================================

@main.command()
@click.argument('reads_file', type=click.Path(exists=True))
@click.option('--kmer-size', '-k', type=int, default=None,
              help='K-mer length (default: from config)')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='Configuration file')
@click.pass_context
def kmers(ctx, reads_file, kmer_size, config_file):
    """
    Count k-mers in READS_FILE and print the abundance distribution.

    Output lines are tab-separated: abundance, number of distinct k-mers.
    """
    config = _load_checked_config(ctx, config_file, {
        'kmers.enabled': True,
        'kmers.kmer_size': kmer_size,
        'overlap_graph.enabled': False,
    })

    analyzer = ReadsAnalyzer(config)
    try:
        analyzer.process_file(reads_file)
    except ValueError as e:
        click.echo(f"✗ {e}", err=True)
        ctx.exit(1)

    distribution = analyzer.kmers_table.calculate_abundances_distribution()
    for abundance, count in enumerate(distribution):
        if abundance > 0:
            click.echo(f"{abundance}\t{count}")


@main.command()
@click.argument('reads_file', type=click.Path(exists=True))
@click.option('--min-overlap', '-m', type=int, default=None,
              help='Minimum overlap length (default: from config)')
@click.option('--output', '-o', type=click.Path(), default=None,
              help='Assembly output file (default: from config)')
@click.option('--gfa', type=click.Path(), default=None,
              help='Optional overlap graph GFA output')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='Configuration file')
@click.pass_context
def assemble(ctx, reads_file, min_overlap, output, gfa, config_file):
    """
    Assemble READS_FILE with a greedy overlap graph layout.

    \b
    Examples:
        readsanalyzer assemble reads.fq -m 20 -o out/assembly.txt
        readsanalyzer assemble reads.fa --gfa out/graph.gfa
    """
    config = _load_checked_config(ctx, config_file, {
        'kmers.enabled': False,
        'overlap_graph.enabled': True,
        'overlap_graph.min_overlap': min_overlap,
        'output.assembly_path': output,
        'output.gfa_path': gfa,
    })

    analyzer = ReadsAnalyzer(config)
    try:
        result = analyzer.run(reads_file)
    except ValueError as e:
        click.echo(f"✗ {e}", err=True)
        ctx.exit(1)
    except OSError as e:
        click.echo(f"✗ I/O error: {e}", err=True)
        ctx.exit(1)

    if ctx.obj.get('QUIET'):
        return

    click.echo(f"Reads processed: {result.reads_processed:,}")
    click.echo(f"Distinct sequences: {result.distinct_sequences:,}")
    click.echo(f"Overlaps: {result.overlaps:,}")
    click.echo(f"Layout path: {result.layout_length:,} sequences")
    click.echo(f"Assembly length: {len(result.assembly):,} bp")
    if result.assembly_written:
        click.echo(f"✓ Assembly written to: {config['output']['assembly_path']}")
    else:
        click.echo("⚠ Assembly was not written to disk")


if __name__ == '__main__':
    sys.exit(main())
