"""
Library modules shared by the generators and the conformance harness.
"""
