"""Tool catalogue and dispatch.

Declares the Supavec tools, validates their arguments, and turns each
call into one request against the Supavec API.
"""
