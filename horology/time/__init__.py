"""
# Calendar and clock value types for the proleptic Gregorian calendar.

# The base unit is the hnsec, one hundred nanoseconds. Days are twenty-four hours
# long and leap seconds are not represented.

#!python
	from horology.time import types, system, views, measure

	d = types.Date(1999, 7, 6)
	dt = types.DateTime(1999, 7, 6, 12, 30, 33)
	st = system.SysTime(dt, tz=views.utc)
	st += measure.Duration.of(hour=12)
	assert st.to_iso_ext_string() == '1999-07-07T00:30:33Z'

# [ Modules ]
# /&.gregorian/
	# Day ordinals, leap years, and month lengths.
# /&.types/
	# &.types.Date, &.types.TimeOfDay, and &.types.DateTime.
# /&.system/
	# &.system.SysTime and Unix time conversions.
# /&.views/
	# Time zone policies; &.views.local provides the process' local zone.
# /&.format/
	# The ISO-8601 codec.
# /&.sysclock/
	# Access to the current time.
"""
