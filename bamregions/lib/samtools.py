"""Thin layer over `samtools view`.

By default we go through the samtools that ships inside pysam (pysam.view, pysam.index ...). This runs in-process
so there is no limit on how many region strings we can pass. If the user asks for a particular samtools executable
we run that as a subprocess instead, in which case the OS limit on command line length applies."""
import logging
import os
import subprocess
import time

import pysam

logger = logging.getLogger(__name__)


def view_command(bam_fname, out_fname, threads=1, regions=None, bed_fname=None):
  """Arguments (after `samtools view`) for writing a BAM with header.

  :param bam_fname: input BAM
  :param out_fname: output BAM
  :param threads: passed on as -@
  :param regions: list of region strings
  :param bed_fname: if given we use samtools' own -L filtering
  :return: list of str
  """
  args = ['-@', str(threads), '-bh', '-o', out_fname, bam_fname]
  if bed_fname is not None:
    args += ['-L', bed_fname]
  if regions:
    args += list(regions)
  return args


def check_arg_length(cmd):
  """Raise ValueError if cmd would not fit on a command line"""
  try:
    arg_max = os.sysconf('SC_ARG_MAX')
  except (ValueError, OSError, AttributeError):
    return
  # Each argument costs its length, a NUL terminator and a pointer in argv
  cmd_len = sum(len(c) + 1 + 8 for c in cmd)
  env_len = sum(len(k) + len(v) + 2 + 8 for k, v in os.environ.items())
  if cmd_len + env_len >= arg_max:
    raise ValueError(
      'samtools command line is too long ({} bytes, limit {}). '
      'Use the bundled samtools (drop --samtools) or the -L method for BED files this large'.format(
        cmd_len, arg_max))


def view(args, samtools=None):
  """Run samtools view with args. A non-zero exit raises pysam.SamtoolsError (bundled samtools) or
  subprocess.CalledProcessError (external samtools). Nothing is cleaned up on failure.

  :param args: as returned by view_command
  :param samtools: path to a samtools executable. If None, use the one bundled with pysam
  """
  t0 = time.time()
  if samtools is None:
    logger.debug('pysam.view {} arguments'.format(len(args)))
    pysam.view(*args, catch_stdout=False)
  else:
    cmd = [samtools, 'view'] + args
    check_arg_length(cmd)
    logger.debug('{} view {} arguments'.format(samtools, len(args)))
    subprocess.run(cmd, check=True)
  t1 = time.time()
  logger.debug('... {:0.2f}s'.format(t1 - t0))


def index(bam_fname, samtools=None):
  logger.debug('BAM index {} ...'.format(bam_fname))
  t0 = time.time()
  if samtools is None:
    pysam.index(bam_fname, bam_fname + '.bai')
  else:
    subprocess.run([samtools, 'index', bam_fname, bam_fname + '.bai'], check=True)
  t1 = time.time()
  logger.debug('... {:0.2f}s'.format(t1 - t0))


def samtools_version(samtools=None):
  """Version string of the samtools we will be running"""
  if samtools is None:
    return '{} (pysam {})'.format(pysam.__samtools_version__, pysam.__version__)
  out = subprocess.run([samtools, '--version'], check=True, stdout=subprocess.PIPE, universal_newlines=True).stdout
  return out.splitlines()[0].split()[-1] if out.strip() else 'unknown'
