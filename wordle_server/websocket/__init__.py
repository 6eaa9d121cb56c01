"""
WebSocket Package

Real-time room events over Flask-SocketIO.
"""
