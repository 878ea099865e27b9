from setuptools import setup, find_packages

with open('long_description.rst') as f:
  ld = f.read()

__version__ = eval(open('bamregions/version.py').read().split('=')[1])
setup(
  name='bamregions',
  version=__version__,
  description='Extract reads overlapping BED intervals from a BAM with samtools',
  long_description=ld,
  keywords=['genomics', 'ngs', 'bam', 'bed', 'samtools'],
  classifiers=[
    'Development Status :: 5 - Production/Stable',
    'Intended Audience :: Science/Research',
    'Topic :: Scientific/Engineering :: Bio-Informatics',
    'License :: OSI Approved :: Apache Software License',
    'Programming Language :: Python :: 3',
  ],
  python_requires='>=3.6',
  packages=find_packages(include=['bamregions*']),
  entry_points={'console_scripts': ['bamregions = bamregions.cli:cli']},
  install_requires=[
    'click>=7.0',
    'pysam>=0.15.0',
  ],
  extras_require={'test': ['pytest']},
)
