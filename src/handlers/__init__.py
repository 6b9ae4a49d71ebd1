"""AWS Lambda entry points.

This module hosts the Firehose transformation and API query handlers.
"""
