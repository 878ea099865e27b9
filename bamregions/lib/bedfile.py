# Follows standard BED convention: https://genome.ucsc.edu/FAQ/FAQformat#format1
# chrom - The name of the chromosome (e.g. chr3, chrY, chr2_random) or scaffold (e.g. scaffold10671).
# chromStart - The starting position of the feature in the chromosome or scaffold.
#              The first base in a chromosome is numbered 0.
# chromEnd - The ending position of the feature in the chromosome or scaffold.
#            The chromEnd base is not included in the display of the feature.
#
# samtools regions are 1-based and closed, so BED (0, 100) becomes chr:1-100
import logging
import re

logger = logging.getLogger(__name__)

# Plain decimal digits only. int() would also take "+5" and "1_000"
_coord = re.compile(r'^-?[0-9]+$')


def _is_record(line):
  """Blank, comment and UCSC header lines carry no interval"""
  s = line.strip()
  return not (s == '' or s.startswith('#') or s.split()[0] in ('track', 'browser'))


def parse_bed_line(line, bed_fname='<bed>', line_no=0):
  """Return (chrom, start, end) from the first three columns of a BED line

  :param line: raw line of text
  :param bed_fname: only used for error messages
  :param line_no: only used for error messages
  :return: (chrom, start, end)
  """
  fields = line.split()
  if len(fields) < 3:
    raise ValueError('{}:{} - expected at least 3 columns, got {}'.format(bed_fname, line_no, len(fields)))
  if not (_coord.match(fields[1]) and _coord.match(fields[2])):
    raise ValueError('{}:{} - non integer coordinates ({}, {})'.format(bed_fname, line_no, fields[1], fields[2]))
  start, end = int(fields[1]), int(fields[2])
  if start < 0:
    raise ValueError('{}:{} - negative start {}'.format(bed_fname, line_no, start))
  if end <= start:
    raise ValueError('{}:{} - end ({}) must be greater than start ({})'.format(bed_fname, line_no, end, start))
  return fields[0], start, end


def read_bed(bed_fname):
  """Load all intervals from a BED file, in file order. Overlapping and repeated intervals are kept as is.

  :param bed_fname:
  :return: list of (chrom, start, end)
  """
  with open(bed_fname, 'r') as fp:
    return [parse_bed_line(ln, bed_fname, n + 1) for n, ln in enumerate(fp) if _is_record(ln)]


def region_string(chrom, start, end):
  return '{}:{}-{}'.format(chrom, start + 1, end)


def bed_to_regions(bed_fname):
  """List of samtools region strings, one per BED interval"""
  regions = [region_string(*r) for r in read_bed(bed_fname)]
  logger.debug('{} regions from {}'.format(len(regions), bed_fname))
  return regions


def bed_to_region_str(bed_fname):
  return ' '.join(bed_to_regions(bed_fname))
