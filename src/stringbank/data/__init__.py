"""String tables and binary resources bundled with stringbank.

Files under ``text/`` are exposed as ``stringbank.data.text.<file>`` and
files under ``byte/`` as ``stringbank.data.byte.<file>``.
"""
