"""Extract the reads overlapping a set of BED intervals from a BAM.

We expand the BED file into samtools region strings (chrom:start-end) and hand them all to a single
`samtools view` call instead of using `samtools view -L`. With an indexed BAM, samtools can then seek straight to
each region rather than streaming the whole file through the BED filter, which is usually a good deal faster
(use `bamregions ... benchmark` to check on your own data).

Output regions are written in the order samtools visits them. Reads overlapping more than one region are written
once per region they overlap unless samtools is told otherwise, exactly as `samtools view bam r1 r2 ...` does.
"""
import logging
import os
import time

from bamregions.lib.bedfile import bed_to_regions
import bamregions.lib.samtools as st

logger = logging.getLogger(__name__)


def check_inputs(bed_fname, bam_fname):
  if not os.path.isfile(bed_fname):
    raise FileNotFoundError('BED file not found: {}'.format(bed_fname))
  if not os.path.isfile(bam_fname):
    raise FileNotFoundError('Input BAM file not found: {}'.format(bam_fname))


def load_regions(bed_fname):
  """Region strings for bed_fname. Raises ValueError on a malformed or empty BED file"""
  regions = bed_to_regions(bed_fname)
  if not regions:
    # samtools view with no regions would copy the whole BAM
    raise ValueError('No intervals in BED file: {}'.format(bed_fname))
  return regions


def extract_bam_regions(bed_fname, bam_fname, threads, out_fname, samtools=None, do_index=False):
  """Write the reads from bam_fname that overlap any interval in bed_fname to out_fname, via expanded regions.

  :param bed_fname:
  :param bam_fname: needs to be indexed
  :param threads: samtools -@
  :param out_fname: created or overwritten
  :param samtools: path to samtools executable. None => samtools bundled with pysam
  :param do_index: if True, index the output
  :return: out_fname
  """
  check_inputs(bed_fname, bam_fname)

  logger.info('Preparing regions from BED file: {}'.format(bed_fname))
  regions = load_regions(bed_fname)

  logger.info('Extracting regions from {} using {} threads...'.format(bam_fname, threads))
  t0 = time.time()
  st.view(st.view_command(bam_fname, out_fname, threads=threads, regions=regions), samtools=samtools)
  t1 = time.time()
  logger.debug('Extracted {} regions in {:0.2f}s'.format(len(regions), t1 - t0))

  if do_index:
    st.index(out_fname, samtools=samtools)

  logger.info('Output written to: {}'.format(out_fname))
  return out_fname


def extract_bam_bed(bed_fname, bam_fname, threads, out_fname, samtools=None, do_index=False):
  """Same as extract_bam_regions, but lets samtools filter on the BED file directly (samtools view -L)"""
  check_inputs(bed_fname, bam_fname)
  load_regions(bed_fname)

  logger.info('Extracting {} from {} with samtools -L using {} threads...'.format(bed_fname, bam_fname, threads))
  st.view(st.view_command(bam_fname, out_fname, threads=threads, bed_fname=bed_fname), samtools=samtools)

  if do_index:
    st.index(out_fname, samtools=samtools)

  logger.info('Output written to: {}'.format(out_fname))
  return out_fname
