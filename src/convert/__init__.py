"""Batch conversion pipeline.

This package decodes hex source files and routes payloads to sinks.
"""
