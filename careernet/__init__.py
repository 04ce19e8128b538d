"""Networking and job-matching utilities for job seekers."""

__version__ = "0.1.0"
