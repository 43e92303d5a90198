"""docsite: static documentation site built from viewport-aware page layouts."""

__version__ = "0.1.0"
