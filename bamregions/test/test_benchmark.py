import os

import pytest

import bamregions.benchmark as bm
from bamregions.test import example_files, expected_qnames, qnames, write_bed


def test_derived_names():
  """benchmark: Reference BAM and log names"""
  assert bm.reference_fname('out.bam') == 'samtools_L_ref_out.bam'
  assert bm.reference_fname('/data/run1/out.bam') == 'samtools_L_ref_out.bam'
  assert bm.benchmark_log_fname('out.bam') == 'out_benchmark.txt'
  assert bm.benchmark_log_fname('/data/run1/out.bam') == '/data/run1/out_benchmark.txt'
  assert bm.benchmark_log_fname('out.cram') == 'out.cram_benchmark.txt'


def test_benchmark(tmpdir, monkeypatch):
  """benchmark: Both methods run, -L first, and are logged"""
  monkeypatch.chdir(str(tmpdir))
  bed, bam = example_files(tmpdir)
  results = bm.benchmark_extraction(bed, bam, 2, 'out.bam')

  assert [r[0] for r in results] == [bm.METHOD_BED, bm.METHOD_REGIONS], results
  assert all(r[1] >= 0 for r in results), results
  for fn in ['out.bam', 'samtools_L_ref_out.bam', 'out_benchmark.txt']:
    assert os.path.exists(fn), fn
  assert qnames('out.bam') == qnames('samtools_L_ref_out.bam') == expected_qnames

  logged = bm.read_benchmark_log('out_benchmark.txt')
  assert [r[0] for r in logged] == [bm.METHOD_BED, bm.METHOD_REGIONS], logged
  for (_, t1), (_, t2) in zip(results, logged):
    assert abs(t1 - t2) < 1e-5


def test_log_format(tmpdir, monkeypatch):
  """benchmark: Log lines are separators, method labels or key: value"""
  monkeypatch.chdir(str(tmpdir))
  bed, bam = example_files(tmpdir)
  bm.benchmark_extraction(bed, bam, 1, 'out.bam')

  lines = open('out_benchmark.txt').read().splitlines()
  assert lines[:3] == ['BED: ' + bed, 'BAM: ' + bam, 'Threads: 1'], lines
  assert lines[4] == bm.SEPARATOR
  assert len([ln for ln in lines if ln.startswith('Elapsed: ')]) == 2
  assert lines.index('[Method 1] ' + bm.METHOD_BED) < lines.index('[Method 2] ' + bm.METHOD_REGIONS)
  for ln in lines:
    assert ln == bm.SEPARATOR or ln.startswith('[Method') or ': ' in ln, ln


def test_missing_input(tmpdir, monkeypatch):
  """benchmark: Missing input, nothing written"""
  monkeypatch.chdir(str(tmpdir))
  bed, bam = example_files(tmpdir)
  with pytest.raises(FileNotFoundError):
    bm.benchmark_extraction(bed, 'nope.bam', 1, 'out.bam')
  assert not os.path.exists('out_benchmark.txt')
  assert not os.path.exists('samtools_L_ref_out.bam')


@pytest.mark.parametrize('bed_text, message', [
  ('chr1\t999\t2000\nchr1\t500\t100\n', 'regions.bed:2'),
  ('# no intervals\n', 'No intervals'),
])
def test_bad_bed(tmpdir, monkeypatch, bed_text, message):
  """benchmark: A malformed or empty BED stops us before either method runs"""
  monkeypatch.chdir(str(tmpdir))
  bed, bam = example_files(tmpdir)
  write_bed(bed, bed_text)
  with pytest.raises(ValueError) as e:
    bm.benchmark_extraction(bed, bam, 1, 'out.bam')
  assert message in str(e.value), str(e.value)
  for fn in ['out.bam', 'samtools_L_ref_out.bam', 'out_benchmark.txt']:
    assert not os.path.exists(fn), fn
