"""Version information for polyscan."""

__version__ = "0.1.0"
__author__ = "Maximillian Marin"
__email__ = "maximilliangmarin@gmail.com"
__license__ = "GPL-2.0"
__description__ = "Find windows in DNA sequences that have >= threshold% of a nucleotide. Outputs 6-column BED."
