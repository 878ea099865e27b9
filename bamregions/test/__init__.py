"""Small BAM + BED fixtures generated on the fly with pysam"""
import os

import pysam

header = {
  'HD': {'VN': '1.6', 'SO': 'coordinate'},
  'SQ': [{'SN': 'chr1', 'LN': 10000}, {'SN': 'chr2', 'LN': 10000}],
}

# (qname, reference_id, 0-based start). All reads are 50bp. Must stay coordinate sorted.
example_reads = [
  ('r1', 0, 100),
  ('r_edge', 0, 950),  # last base is 999, the first base of the first BED interval
  ('r2', 0, 1000),
  ('r3', 0, 1500),
  ('r4', 0, 5000),
  ('r5', 1, 200),
  ('r6', 1, 3000),
]

example_bed = 'chr1\t999\t2000\tfirst\nchr2\t2900\t3100\tsecond\n'
example_regions = ['chr1:1000-2000', 'chr2:2901-3100']
expected_qnames = ['r_edge', 'r2', 'r3', 'r6']


def write_example_bam(bam_fname, do_index=True):
  with pysam.AlignmentFile(bam_fname, 'wb', header=header) as fp:
    for qname, ref_id, pos in example_reads:
      r = pysam.AlignedSegment()
      r.query_name = qname
      r.query_sequence = 'A' * 50
      r.flag = 0
      r.reference_id = ref_id
      r.reference_start = pos
      r.mapping_quality = 60
      r.cigar = ((0, 50),)
      r.query_qualities = pysam.qualitystring_to_array('I' * 50)
      fp.write(r)
  if do_index:
    pysam.index(bam_fname)
  return bam_fname


def write_bed(bed_fname, text=example_bed):
  with open(bed_fname, 'w') as fp:
    fp.write(text)
  return bed_fname


def example_files(tmpdir, do_index=True):
  return (write_bed(os.path.join(str(tmpdir), 'regions.bed')),
          write_example_bam(os.path.join(str(tmpdir), 'sample.bam'), do_index=do_index))


def qnames(bam_fname):
  with pysam.AlignmentFile(bam_fname) as fp:
    return [r.query_name for r in fp.fetch(until_eof=True)]
