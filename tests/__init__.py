"""Test suite for opensi-core.

Test Structure:
- unit/: Unit tests mirroring packages/opensi/core
  - package/: models, tree engine, resource resolution, labels
  - formats/siq/: content readers, parser, exporter, container codec
  - config/, utils/, parsers/: ambient configuration, logging, XML helper
"""
