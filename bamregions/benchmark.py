"""Time `samtools view -L <bed>` against `samtools view <bam> <expanded regions>` on the same inputs.

The two methods are run one after the other, never together, so they don't compete for disk or CPU. The log looks
like:

BED: regions.bed
BAM: sample.bam
Threads: 4
samtools: 1.21 (pysam 0.23.0)
----------------------------------
[Method 1] samtools -L (direct BED)
Elapsed: 12.345678s
----------------------------------
[Method 2] expanded region list
Elapsed: 1.234567s
----------------------------------
"""
import logging
import os
import time

from bamregions.extract import check_inputs, extract_bam_bed, extract_bam_regions, load_regions
from bamregions.lib.samtools import samtools_version

logger = logging.getLogger(__name__)

SEPARATOR = '-' * 34
METHOD_BED = 'samtools -L (direct BED)'
METHOD_REGIONS = 'expanded region list'


def reference_fname(out_fname):
  """The -L output goes into the current directory as samtools_L_ref_<name of output>"""
  return 'samtools_L_ref_' + os.path.basename(out_fname)


def benchmark_log_fname(out_fname):
  base = out_fname[:-len('.bam')] if out_fname.endswith('.bam') else out_fname
  return base + '_benchmark.txt'


def _timed(fn, *args, **kwargs):
  t0 = time.time()
  fn(*args, **kwargs)
  t1 = time.time()
  return max(t1 - t0, 0.0)


def benchmark_extraction(bed_fname, bam_fname, threads, out_fname, samtools=None, do_index=False):
  """Run both extraction methods and log how long each took.

  Writes out_fname (expanded regions), reference_fname(out_fname) (samtools -L) and
  benchmark_log_fname(out_fname).

  :return: [(method name, elapsed seconds), ...] -L first, expanded regions second
  """
  check_inputs(bed_fname, bam_fname)
  # Both methods see the same BED, so reject a bad one before either runs
  load_regions(bed_fname)
  ref_fname = reference_fname(out_fname)
  log_fname = benchmark_log_fname(out_fname)
  version = samtools_version(samtools)
  logger.debug('samtools {}'.format(version))

  logger.info('Running benchmark mode...')
  with open(log_fname, 'w') as fp:
    fp.write('BED: {}\nBAM: {}\nThreads: {}\nsamtools: {}\n{}\n'.format(
      bed_fname, bam_fname, threads, version, SEPARATOR))

  results = []
  for n, (name, fn, fname) in enumerate([
      (METHOD_BED, extract_bam_bed, ref_fname),
      (METHOD_REGIONS, extract_bam_regions, out_fname)]):
    elapsed = _timed(fn, bed_fname, bam_fname, threads, fname, samtools=samtools, do_index=do_index)
    logger.debug('{}: {:0.2f}s'.format(name, elapsed))
    # Appended per method: a later failure leaves the earlier timings in place
    with open(log_fname, 'a') as fp:
      fp.write('[Method {}] {}\nElapsed: {:.6f}s\n{}\n'.format(n + 1, name, elapsed, SEPARATOR))
    results.append((name, elapsed))

  logger.info('Benchmark complete.')
  logger.info('Results saved to: {}'.format(log_fname))
  logger.info('Outputs: {} and {}'.format(out_fname, ref_fname))
  return results


def read_benchmark_log(log_fname):
  """Parse a benchmark log back into [(method name, elapsed seconds), ...]"""
  results, name = [], None
  with open(log_fname, 'r') as fp:
    for ln in fp:
      ln = ln.strip()
      if ln.startswith('[Method'):
        name = ln.split('] ', 1)[1]
      elif ln.startswith('Elapsed:') and name is not None:
        results.append((name, float(ln.split(':', 1)[1].strip().rstrip('s'))))
        name = None
  return results
