"""Resource files and configuration templates."""


def get_default_config() -> str:
    """Return default configuration YAML content."""
    return """# polyscan Configuration File

# Input/output files (can be overridden by CLI arguments)
input_file: ~
# BED output; ~ or "-" writes to stdout
output_file: ~
# Optional per-record summary table (TSV)
summary_file: ~

# Sliding-window scan
scan:
  window_size: 10
  # Required share of the nucleotide, 50.0 - 100.0
  percentage: 80.0
  # One of A, C, G, T, N; the complement is reported on the "-" strand
  nucleotide: "A"

# Runtime settings
runtime:
  log_level: "WARNING"
  log_file: ~
  enable_progress: false
"""
