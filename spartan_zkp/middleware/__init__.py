"""
HTTP middleware: request ids, access logging and error → envelope mapping.
"""
