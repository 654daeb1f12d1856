"""
Trigger-family providers that turn deployment options into CloudFunctions.
"""
