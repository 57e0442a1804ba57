"""
# Typed system clock access.

# The real clock is read through &time.time_ns and converted to std time.
"""
import time

from . import earth
from . import system
from . import views

def _real_clock_read(time_ns=time.time_ns, ratio=100, delta=earth.unix_epoch_hnsecs):
	return (time_ns() // ratio) + delta

def now(tz=None, Type=system.SysTime) -> system.SysTime:
	"""
	# Get the current point in time according to the system's real clock
	# presented in &tz, or the local time zone when &tz is &None.
	"""
	return Type(_real_clock_read(), tz=tz)

def utc(Type=system.SysTime) -> system.SysTime:
	"""
	# Get the current point in time presented in UTC.
	"""
	return Type(_real_clock_read(), tz=views.utc)

def today(tz=None):
	"""
	# The current &types.Date on the clock of &tz, or the local clock when &tz is &None.
	"""
	return now(tz).to_date()
