"""
# Format and parse ISO-8601 strings.

# Three styles are provided for each of the value types:

# /`'iso'`/
	# The basic form: `YYYYMMDDTHHMMSS`.
# /`'extended'`/
	# The extended form: `YYYY-MM-DDTHH:MM:SS`.
# /`'simple'`/
	# A readable form using the month's abbreviation: `YYYY-Mon-DD HH:MM:SS`.

# Years are padded to four digits. Years beyond four digits carry a `+` and
# negative years carry a `-`. &system.SysTime strings may carry a fraction of a
# second with up to seven digits and a zone suffix: nothing for local time, `Z`
# for UTC, or an offset.

# Parsing can fail in two ways. Text that does not conform to the grammar raises
# &errors.InvalidFormat; conforming text naming a nonexistent day or time raises
# &errors.InvalidDate or &errors.InvalidTime.
"""
import functools

from . import earth
from . import errors
from . import gregorian
from . import measure
from . import system
from . import types
from . import views

#: Number of digits permitted in the fraction of a second.
fraction_precision = 7

models = {
	'date': {
		'iso': "{year}{month:02}{day:02}",
		'extended': "{year}-{month:02}-{day:02}",
		'simple': "{year}-{month}-{day:02}",
	},
	'time': {
		'iso': "{hour:02}{minute:02}{second:02}",
		'extended': "{hour:02}:{minute:02}:{second:02}",
		'simple': "{hour:02}:{minute:02}:{second:02}",
	},
	'offset': {
		'iso': "{sign}{hour:02}{minute:02}",
		'extended': "{sign}{hour:02}:{minute:02}",
		'simple': "{sign}{hour:02}:{minute:02}",
	},
}

#: Separator between the date and the time of day.
separators = {
	'iso': 'T',
	'extended': 'T',
	'simple': ' ',
}

aliases = {
	'basic': 'iso',
	'ext': 'extended',
}

def _style(style, _deref=aliases.get):
	style = _deref(style, style)
	if style not in separators:
		raise ValueError("unknown format style: %r" %(style,))
	return style

def format_year(year):
	"""
	# Format the year with at least four digits and a sign when it cannot be
	# represented in four unsigned digits.
	"""
	if year > 9999:
		return '+%05d' %(year,)
	elif year < 0:
		return '-%04d' %(-year,)
	else:
		return '%04d' %(year,)

def format_fraction(hnsecs):
	"""
	# The fraction of a second as a decimal with trailing zeros removed;
	# an empty string when the fraction is zero.
	"""
	if not hnsecs:
		return ''
	return '.' + ('%0*d' %(fraction_precision, hnsecs)).rstrip('0')

def format_offset(offset, style):
	"""
	# Format the UTC offset given as a &measure.Duration or hnsecs.

	# [ Exceptions ]
	# /&ValueError/
		# When the offset is not a whole number of minutes. ISO-8601 offsets have
		# no seconds field; local mean time offsets of historical zones are the
		# usual source.
	"""
	hnsecs = int(offset)
	if hnsecs % earth.hnsecs_in_minute:
		raise ValueError("utc offset is not a whole number of minutes: %r" %(offset,))
	hours, minutes = divmod(abs(hnsecs) // earth.hnsecs_in_minute, earth.minutes_in_hour)
	return models['offset'][_style(style)].format(
		sign='-' if hnsecs < 0 else '+',
		hour=hours, minute=minutes,
	)

def format_zone(st, style):
	"""
	# The zone suffix of the &system.SysTime.
	"""
	tz = st.timezone
	if isinstance(tz, views.LocalTime):
		return ''
	elif isinstance(tz, views.UTC):
		return 'Z'
	else:
		return format_offset(tz.utc_offset_at(st.std_time), style)

def format_date(date, style='extended',
	month_abbrev=gregorian.month_abbreviations.__getitem__,
):
	style = _style(style)
	month = date.month
	if style == 'simple':
		month = month_abbrev(month - 1).capitalize()

	return models['date'][style].format(
		year=format_year(date.year), month=month, day=date.day
	)

def format_time_of_day(tod, style='extended'):
	style = _style(style)
	return models['time'][style].format(
		hour=tod.hour, minute=tod.minute, second=tod.second
	)

def format_date_time(dt, style='extended'):
	style = _style(style)
	return format_date(dt, style) + separators[style] + format_time_of_day(dt, style)

def format_sys_time(st, style='extended'):
	style = _style(style)
	dt, fraction = st._decompose()
	return ''.join((
		format_date_time(dt, style),
		format_fraction(fraction),
		format_zone(st, style),
	))

# Parsing

_digits = frozenset('0123456789')

def _integer(text, width=None):
	if not text or not _digits.issuperset(text):
		raise ValueError("expected digits, found %r" %(text,))
	if width is not None and len(text) != width:
		raise ValueError("expected %d digits, found %r" %(width, text))
	return int(text)

def _year(text):
	if text[:1] in ('+', '-'):
		digits = text[1:]
		if len(digits) < 4:
			raise ValueError("signed year requires at least four digits: %r" %(text,))
		y = _integer(digits)
		return -y if text[0] == '-' else y
	return _integer(text, 4)

def _syntax(fun):
	"""
	# Convert the failures of a grammar function into &errors.InvalidFormat.
	"""
	@functools.wraps(fun)
	def EXCEPTION(text, style):
		try:
			return fun(text, style)
		except errors.InvalidFormat:
			raise
		except (ValueError, IndexError, KeyError) as err:
			raise errors.InvalidFormat(
				"text does not conform to the %s grammar" %(style,), text, style
			) from err
	return EXCEPTION

@_syntax
def split_date(text, style):
	"""
	# Split the date string into its integer fields: `(year, month, day)`.
	"""
	if style == 'iso':
		if len(text) < 8:
			raise ValueError("basic date requires at least eight characters")
		return (_year(text[:-4]), _integer(text[-4:-2], 2), _integer(text[-2:], 2))

	year, month, day = text.rsplit('-', 2)
	if style == 'simple':
		if len(month) != 3:
			raise ValueError("month abbreviation expected: %r" %(month,))
		month = gregorian.month_name_to_number[month.lower()]
	else:
		month = _integer(month, 2)
	return (_year(year), month, _integer(day, 2))

@_syntax
def split_time(text, style):
	"""
	# Split the time string into its integer fields: `(hour, minute, second)`.
	"""
	if style == 'iso':
		_integer(text, 6)
		return (int(text[0:2]), int(text[2:4]), int(text[4:6]))

	hour, minute, second = text.split(':')
	return (_integer(hour, 2), _integer(minute, 2), _integer(second, 2))

@_syntax
def split_date_time(text, style):
	"""
	# Split the date-time string into its date and time substrings.
	"""
	sep = separators[style]
	if sep not in text:
		raise ValueError("separator %r not found" %(sep,))
	return tuple(text.split(sep, 1))

@_syntax
def split_fraction(text, style):
	"""
	# Convert the digits following the decimal point to hnsecs.
	"""
	if not 0 < len(text) <= fraction_precision:
		raise ValueError("fraction requires one to seven digits")
	_integer(text)
	return int(text.ljust(fraction_precision, '0'))

@_syntax
def split_offset(text, style):
	"""
	# Convert the offset suffix, `+HH:MM` or `+HHMM`, to a &measure.Duration.
	"""
	sign = text[0]
	if sign not in ('+', '-'):
		raise ValueError("offset requires a sign")

	body = text[1:]
	if len(body) == 5 and body[2] == ':':
		hours, minutes = body[:2], body[3:]
	elif len(body) == 4:
		hours, minutes = body[:2], body[2:]
	else:
		raise ValueError("offset must be HH:MM or HHMM")

	hours = _integer(hours, 2)
	minutes = _integer(minutes, 2)
	if hours > 23 or minutes > 59:
		raise ValueError("offset out of range")

	offset = measure.Duration.of(hour=hours, minute=minutes)
	return -offset if sign == '-' else offset

def _time_style(style):
	# The simple form uses the extended time of day.
	return 'iso' if style == 'iso' else 'extended'

def parse_date(text, style='extended'):
	"""
	# Parse a &types.Date.
	"""
	style = _style(style)
	return types.Date(*split_date(text.strip(), style))

def parse_time_of_day(text, style='extended'):
	"""
	# Parse a &types.TimeOfDay.
	"""
	style = _time_style(_style(style))
	return types.TimeOfDay(*split_time(text.strip(), style))

def parse_date_time(text, style='extended'):
	"""
	# Parse a &types.DateTime.
	"""
	style = _style(style)
	date, time = split_date_time(text.strip(), style)
	return types.DateTime(
		*(split_date(date, style) + split_time(time, _time_style(style)))
	)

def parse_sys_time(text, style='extended', tz=None):
	"""
	# Parse a &system.SysTime.

	# A string without a zone suffix is read on the local clock, `Z` is UTC, and an
	# offset selects a &views.SimpleTimeZone. When &tz is given, the parsed instant
	# is presented in &tz.
	"""
	style = _style(style)
	source = text.strip()
	date, rest = split_date_time(source, style)

	marks = [i for i in map(rest.find, ('.', 'Z', '+', '-')) if i != -1]
	split = min(marks) if marks else len(rest)
	time, suffix = rest[:split], rest[split:]

	fraction = 0
	if suffix.startswith('.'):
		marks = [i for i in map(suffix.find, ('Z', '+', '-')) if i != -1]
		end = min(marks) if marks else len(suffix)
		fraction = split_fraction(suffix[1:end], style)
		suffix = suffix[end:]

	if not suffix:
		zone = views.local()
	elif suffix == 'Z':
		zone = views.utc
	else:
		zone = views.SimpleTimeZone(split_offset(suffix, style))

	dt = types.DateTime(
		*(split_date(date, style) + split_time(time, _time_style(style)))
	)
	st = system.SysTime(dt, measure.Duration(fraction), zone)
	if tz is not None:
		return st.to_other_tz(tz)
	return st
