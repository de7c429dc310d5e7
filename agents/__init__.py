"""Agents package"""
