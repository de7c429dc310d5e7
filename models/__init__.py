"""Models package"""
