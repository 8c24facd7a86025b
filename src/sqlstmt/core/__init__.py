"""
sqlstmt core: settings and logging
"""
