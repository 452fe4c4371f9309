"""
Front Desk Core Audit
=======================
Append-only room and booking trails. Models live in core.audit.models,
writers in core.audit.functions.
"""
