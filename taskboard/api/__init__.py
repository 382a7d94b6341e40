"""HTTP façade"""
