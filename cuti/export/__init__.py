"""
Export of consolidated holidays to JSON or CSV.
"""
