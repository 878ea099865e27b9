import logging
import subprocess

import click
import pysam

from bamregions.version import __version__


logger = logging.getLogger(__name__)


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.version_option(version=__version__)
@click.option('-v', '--verbose', type=int, default=2, help='0: errors only ... 3: debug')
@click.option('--samtools', help='Run this samtools executable instead of the one bundled with pysam')
@click.option('--index', 'do_index', is_flag=True, help='Index the output BAM(s)')
@click.argument('bed', required=False)
@click.argument('bamin', required=False)
@click.argument('threads', required=False)
@click.argument('bamout', required=False)
@click.argument('mode', required=False)
@click.pass_context
def cli(ctx, verbose, samtools, do_index, bed, bamin, threads, bamout, mode):
  """Extract the reads overlapping the intervals of a BED file from a BAM.

  \b
  Usage:
    bamregions <bed_file> <input_bam> <threads> <output_bam> [benchmark]

  \b
  Example:
    bamregions regions.bed sample.bam 4 sample_filtered.bam
    bamregions regions.bed sample.bam 4 sample_filtered.bam benchmark

  The BED intervals are converted to samtools region strings (e.g. chr1:1000-2000) and passed to samtools view
  in one go, rather than filtering with samtools view -L, because this is faster on indexed BAMs.
  BED coordinates are 0-based; they are converted to the 1-based coordinates samtools expects.

  \b
  Notes:
    - With 'benchmark' as the 5th argument, both methods are run and timed:
        1) Direct 'samtools view -L bed_file' extraction
        2) Extraction using the expanded region list
    - The benchmark results are written to <output_bam without .bam>_benchmark.txt
    - The samtools -L output BAM is named samtools_L_ref_<output_bam> and is
      written to the current directory
    - Each run is independent, so many BAMs can be processed with GNU parallel:
        ls *.bam | parallel -j 4 bamregions regions.bed {} 4 '{/.}_filtered.bam'
  """
  logging.basicConfig(level=[
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG
  ][max(0, min(verbose, 3))])
  logger.debug('bamregions version {}'.format(__version__))

  if bamout is None:
    click.echo(ctx.get_help())
    ctx.exit(0)
  # Converted here, not by click, so that too few arguments always gets the usage text
  threads = click.INT.convert(threads, None, ctx)

  try:
    if mode == 'benchmark':
      import bamregions.benchmark as bm
      bm.benchmark_extraction(bed, bamin, threads, bamout, samtools=samtools, do_index=do_index)
    else:
      import bamregions.extract as ex
      ex.extract_bam_regions(bed, bamin, threads, bamout, samtools=samtools, do_index=do_index)
  except (FileNotFoundError, ValueError) as e:
    click.echo('Error: {}'.format(e), err=True)
    ctx.exit(1)
  except (pysam.SamtoolsError, subprocess.CalledProcessError) as e:
    click.echo('Error: samtools failed: {}'.format(e), err=True)
    ctx.exit(1)
