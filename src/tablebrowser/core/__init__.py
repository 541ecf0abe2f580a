"""
Core - table view paging/sorting engine and its value types
"""
