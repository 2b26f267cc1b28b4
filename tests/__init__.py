"""Tests for docembed: builder pipeline, batching, backends, config and the HTTP surface."""
