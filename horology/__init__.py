"""
# Horology: calendar and clock value types.

# [ Packages ]
# /&.time/
	# Dates, times of day, absolute instants, zone policies, and the ISO-8601 codec.
# /&.test/
	# Test primitives used by the package's test modules.
"""
