"""
Test suite for html_interpreter project.

This module contains all unit tests for the html_interpreter package.
"""
