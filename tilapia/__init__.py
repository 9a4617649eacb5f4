"""UDP packet daemon and launcher, process and shared-memory helpers, and tiIR binary listings."""

__version__ = "0.1.0"