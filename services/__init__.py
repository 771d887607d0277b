"""Background task and presentation services"""
