"""Clinic dashboard application.

This package contains the models, activity aggregation services and
read-only views answering the dashboard's patient and billing queries.
"""
