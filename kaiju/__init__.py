"""
King of Tokyo (simplified) - dice combat board game for 2-6 kaiju.
"""
