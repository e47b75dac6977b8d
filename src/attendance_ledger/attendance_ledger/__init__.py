"""Attendance Ledger package.

An append-only, hash-linked chain of attendance records with a thin Flask
JSON layer over the service/repository layers.
"""
