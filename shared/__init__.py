"""Shared code used by connectors and services"""
