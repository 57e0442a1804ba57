"""
# Date, TimeOfDay, and DateTime.
"""
import datetime
from .. import types
from .. import measure
from .. import errors
from .. import week

Date = types.Date
TimeOfDay = types.TimeOfDay
DateTime = types.DateTime
Duration = measure.Duration
clamp = types.AllowDayOverflow.clamp

def test_date_construction(test):
	d = Date(1999, 7, 6)
	test/d.year == 1999
	test/d.month == 7
	test/d.day == 6
	test/Date() == Date(1, 1, 1)
	test/Date(0, 2, 29).is_leap_year == True
	test/errors.InvalidDate ^ (lambda: Date(1999, 2, 29))
	test/errors.InvalidDate ^ (lambda: Date(1999, 13, 1))
	test/errors.InvalidDate ^ (lambda: Date(1999, 0, 1))
	test/errors.InvalidDate ^ (lambda: Date(1999, 4, 31))
	test/ValueError ^ (lambda: Date(1999, 4, 31))

def test_date_setters_atomic(test):
	d = Date(2000, 2, 29)
	test/errors.InvalidDate ^ (lambda: setattr(d, 'year', 1999))
	test/d == Date(2000, 2, 29)
	test/errors.InvalidDate ^ (lambda: setattr(d, 'month', 4) or setattr(d, 'day', 31))
	test/d == Date(2000, 4, 29)

	d = Date(2000, 1, 31)
	test/errors.InvalidDate ^ (lambda: setattr(d, 'month', 2))
	test/d == Date(2000, 1, 31)
	d.day = 15
	d.month = 2
	test/d == Date(2000, 2, 15)

def test_date_year_bc(test):
	d = Date(0, 1, 1)
	test/d.year_bc == 1
	test/d.is_ad == False
	d.year_bc = 10
	test/d.year == -9
	test/errors.InvalidYearBC ^ (lambda: Date(2000, 1, 1).year_bc)
	test/errors.InvalidYearBC ^ (lambda: setattr(d, 'year_bc', 0))
	test/d.year == -9

def test_date_day_of_year(test):
	d = Date(2000, 1, 1)
	test/d.day_of_year == 1
	d.day_of_year = 60
	test/d == Date(2000, 2, 29)
	test/errors.InvalidDate ^ (lambda: setattr(d, 'day_of_year', 367))
	test/d == Date(2000, 2, 29)
	test/Date(1999, 12, 31).day_of_year == 365

def test_date_ordinal(test):
	d = Date(2000, 1, 1)
	test/d.day_of_gregorian_cal == 730120
	d.day_of_gregorian_cal = 1
	test/d == Date(1, 1, 1)
	d.day_of_gregorian_cal = 0
	test/d == Date(0, 12, 31)
	test/Date.from_ordinal(-365) == Date(0, 1, 1)

def test_date_derived(test):
	d = Date(1999, 7, 6)
	test/d.day_of_week == week.tuesday
	test/d.iso_week == 27
	test/d.days_in_month == 31
	test/d.end_of_month == Date(1999, 7, 31)
	test/Date(2000, 2, 10).end_of_month == Date(2000, 2, 29)
	test/d.is_ad == True
	test/Date(2000, 1, 1).julian_day == 2451545
	test/Date(2000, 1, 1).mod_julian_day == 51544

def test_date_add_years(test):
	test/Date(1999, 7, 6).add('year', 7) == Date(2006, 7, 6)
	test/Date(1999, 7, 6).add('years', -7) == Date(1992, 7, 6)
	test/Date(2000, 2, 29).add('year', 1) == Date(2001, 3, 1)
	test/Date(2000, 2, 29).add('year', 1, clamp) == Date(2001, 2, 28)
	test/Date(2000, 2, 29).add('year', 4) == Date(2004, 2, 29)

def test_date_add_months(test):
	test/Date(1999, 7, 6).add('month', 1) == Date(1999, 8, 6)
	test/Date(1999, 12, 15).add('month', 1) == Date(2000, 1, 15)
	test/Date(1999, 7, 6).add('month', -13) == Date(1998, 6, 6)
	test/Date(1999, 1, 31).add('month', 1) == Date(1999, 3, 3)
	test/Date(1999, 1, 31).add('month', 1, clamp) == Date(1999, 2, 28)
	test/Date(2000, 1, 31).add('month', 1) == Date(2000, 3, 2)
	test/Date(2000, 1, 31).add('month', 1, clamp) == Date(2000, 2, 29)
	test/Date(1, 1, 1).add('month', -1) == Date(0, 12, 1)

def test_date_add_chains(test):
	d = Date(1999, 7, 6)
	r = d.add('month', 1).add('day', 1)
	test/r % d
	test/d == Date(1999, 8, 7)

def test_date_add_days(test):
	test/Date(1999, 12, 31).add('day', 1) == Date(2000, 1, 1)
	test/Date(2000, 1, 1).add('week', -1) == Date(1999, 12, 25)
	test/ValueError ^ (lambda: Date(2000, 1, 1).add('hour', 1))
	test/ValueError ^ (lambda: Date(2000, 1, 1).add('fortnight', 1))

def test_date_roll(test):
	test/Date(1999, 12, 15).roll('month', 1) == Date(1999, 1, 15)
	test/Date(1999, 1, 15).roll('month', -1) == Date(1999, 12, 15)
	test/Date(1999, 5, 31).roll('month', 1) == Date(1999, 7, 1)
	test/Date(1999, 5, 31).roll('month', 1, clamp) == Date(1999, 6, 30)
	test/Date(1999, 2, 28).roll('day', 1) == Date(1999, 2, 1)
	test/Date(1999, 7, 1).roll('day', -1) == Date(1999, 7, 31)
	test/Date(2000, 2, 28).roll('day', 1) == Date(2000, 2, 29)
	test/Date(1999, 7, 6).roll('day', 365) == Date(1999, 7, 30)
	test/Date(2000, 2, 29).roll('year', 1) == Date(2001, 3, 1)

def test_date_arithmetic(test):
	d = Date(1999, 7, 6)
	test/(d + Duration.of(day=1)) == Date(1999, 7, 7)
	test/(Duration.of(day=1) + d) == Date(1999, 7, 7)
	test/(d - Duration.of(day=6)) == Date(1999, 6, 30)
	test/(d + Duration.of(hour=47)) == Date(1999, 7, 7)
	test/(d - Duration.of(hour=47)) == Date(1999, 7, 5)
	test/(d + datetime.timedelta(days=2)) == Date(1999, 7, 8)
	test/d == Date(1999, 7, 6)
	test/(Date(2000, 1, 1) - Date(1999, 1, 1)) == Duration.of(day=365)
	test/(Date(1999, 1, 1) - Date(2000, 1, 1)) == Duration.of(day=-365)
	test/TypeError ^ (lambda: d + 1)

	d += Duration.of(week=1)
	test/d == Date(1999, 7, 13)
	d -= Duration.of(day=13)
	test/d == Date(1999, 6, 30)

def test_date_augmented_assignment_rebinds(test):
	a = Date(1999, 7, 6)
	b = a
	b += Duration.of(day=1)
	test/b == Date(1999, 7, 7)
	test/a == Date(1999, 7, 6)
	test/(b is a) == False

def test_extremes_are_fresh(test):
	d = Date.min
	d.add('year', 1)
	test/Date.min == Date(-32768, 1, 1)
	test/(Date.max is Date.max) == False

	t = TimeOfDay.max
	t -= Duration.of(hour=1)
	test/TimeOfDay.max == TimeOfDay(23, 59, 59)

	dt = DateTime.max
	dt.hour = 0
	test/DateTime.max == DateTime(32767, 12, 31, 23, 59, 59)

def test_date_ordering(test):
	test/Date(1999, 7, 6) < Date(1999, 7, 7)
	test/Date(-1, 12, 31) < Date(0, 1, 1)
	test/Date(2000, 1, 1) >= Date(1999, 12, 31)
	test/Date(1999, 7, 6) != Date(1999, 7, 7)
	test/hash(Date(1999, 7, 6)) == hash(Date(1999, 7, 6))
	test/Date.min < Date.max
	test/Date.min == Date(-32768, 1, 1)
	test/Date.max == Date(32767, 12, 31)
	test/(Date(1999, 7, 6) == (1999, 7, 6)) == False

def test_date_copy(test):
	d = Date(1999, 7, 6)
	c = d.copy()
	c.day = 7
	test/d.day == 6
	test/repr(d) == 'Date(1999, 7, 6)'

def test_date_diff_months(test):
	test/Date(1999, 12, 31).diff_months(Date(2000, 1, 1)) == -1
	test/Date(2000, 1, 1).diff_months(Date(1999, 12, 31)) == 1
	test/Date(2000, 7, 31).diff_months(Date(2000, 7, 1)) == 0

def test_time_of_day(test):
	t = TimeOfDay(12, 30, 33)
	test/t.hour == 12
	test/t.minute == 30
	test/t.second == 33
	test/TimeOfDay() == TimeOfDay.min
	test/errors.InvalidTime ^ (lambda: TimeOfDay(24, 0, 0))
	test/errors.InvalidTime ^ (lambda: TimeOfDay(0, 60, 0))
	test/errors.InvalidTime ^ (lambda: TimeOfDay(0, 0, 60))
	test/errors.InvalidTime ^ (lambda: TimeOfDay(-1, 0, 0))
	test/errors.InvalidTime ^ (lambda: setattr(t, 'minute', 61))
	test/t == TimeOfDay(12, 30, 33)

def test_time_of_day_add(test):
	test/TimeOfDay(23, 59, 59).add('second', 1) == TimeOfDay(0, 0, 0)
	test/TimeOfDay(12, 30, 33).add('minute', 90) == TimeOfDay(14, 0, 33)
	test/TimeOfDay(0, 0, 0).add('hour', -1) == TimeOfDay(23, 0, 0)
	test/TimeOfDay(0, 0, 0).add('hours', 48) == TimeOfDay(0, 0, 0)
	test/ValueError ^ (lambda: TimeOfDay().add('day', 1))

def test_time_of_day_roll(test):
	test/TimeOfDay(12, 30, 33).roll('minute', 90) == TimeOfDay(12, 0, 33)
	test/TimeOfDay(12, 30, 59).roll('second', 1) == TimeOfDay(12, 30, 0)
	test/TimeOfDay(12, 0, 0).roll('hour', -13) == TimeOfDay(23, 0, 0)

def test_time_of_day_arithmetic(test):
	t = TimeOfDay(23, 0, 0)
	test/(t + Duration.of(hour=2)) == TimeOfDay(1, 0, 0)
	test/(t - Duration.of(hour=24)) == TimeOfDay(23, 0, 0)
	test/(t + Duration.of(millisecond=1999)) == TimeOfDay(23, 0, 1)
	test/(TimeOfDay(1, 0, 0) - TimeOfDay(0, 0, 1)) == Duration.of(second=3599)
	test/(TimeOfDay(0, 0, 1) - TimeOfDay(1, 0, 0)) == Duration.of(second=-3599)
	test/TimeOfDay(0, 0, 1) < TimeOfDay(1, 0, 0)
	t += Duration.of(minute=1)
	test/t == TimeOfDay(23, 1, 0)

def test_date_time_construction(test):
	dt = DateTime(1999, 7, 6, 12, 30, 33)
	test/dt.date == Date(1999, 7, 6)
	test/dt.time_of_day == TimeOfDay(12, 30, 33)
	test/DateTime.combine(Date(1999, 7, 6), TimeOfDay(12, 30, 33)) == dt
	test/DateTime.combine(Date(1999, 7, 6)) == DateTime(1999, 7, 6)
	test/errors.InvalidDate ^ (lambda: DateTime(1999, 2, 29))
	test/errors.InvalidTime ^ (lambda: DateTime(1999, 2, 28, 25))
	test/repr(dt) == 'DateTime(1999, 7, 6, 12, 30, 33)'

def test_date_time_value_semantics(test):
	dt = DateTime(1999, 7, 6, 12, 30, 33)
	d = dt.date
	d.day = 1
	test/dt.day == 6
	dt.date = d
	test/dt.day == 1
	d.day = 2
	test/dt.day == 1

def test_date_time_setters(test):
	dt = DateTime(2000, 2, 29, 12)
	test/errors.InvalidDate ^ (lambda: setattr(dt, 'year', 1999))
	test/dt == DateTime(2000, 2, 29, 12)
	dt.hour = 0
	dt.minute = 1
	dt.second = 2
	test/dt == DateTime(2000, 2, 29, 0, 1, 2)
	dt.day_of_year = 1
	test/dt == DateTime(2000, 1, 1, 0, 1, 2)

def test_date_time_difference(test):
	# 1998-07-06 to 1999-07-06 contains no leap day.
	a = DateTime(1999, 7, 6, 12, 30, 33)
	b = DateTime(1998, 7, 6, 12, 30, 33)
	test/(a - b) == Duration.of(second=31536000)
	test/(b - a) == Duration.of(second=-31536000)
	test/(DateTime(2000, 1, 1) - DateTime(1999, 12, 31, 23, 59, 59)) == Duration.of(second=1)

def test_date_time_carry(test):
	test/(DateTime(1999, 12, 31, 23, 59, 59) + Duration.of(second=1)) == DateTime(2000, 1, 1)
	test/(DateTime(2000, 1, 1) - Duration.of(second=1)) == DateTime(1999, 12, 31, 23, 59, 59)
	test/(DateTime(1, 1, 1) - Duration.of(second=1)) == DateTime(0, 12, 31, 23, 59, 59)
	test/(DateTime(2000, 1, 1) + Duration.of(millisecond=1500)) == DateTime(2000, 1, 1, 0, 0, 1)
	test/(DateTime(2000, 1, 1) - Duration.of(millisecond=1500)) == DateTime(1999, 12, 31, 23, 59, 59)
	test/(DateTime(2000, 1, 1) + Duration.of(day=-366)) == DateTime(1998, 12, 31)

def test_date_time_add(test):
	test/DateTime(1999, 7, 6, 12).add('hour', 25) == DateTime(1999, 7, 7, 13)
	test/DateTime(1999, 7, 6, 12).add('minute', -12 * 60 - 1) == DateTime(1999, 7, 5, 23, 59)
	test/DateTime(1999, 7, 6, 12).add('day', 26) == DateTime(1999, 8, 1, 12)
	test/DateTime(2000, 1, 31, 12).add('month', 1) == DateTime(2000, 3, 2, 12)
	test/DateTime(2000, 1, 31, 12).add('month', 1, clamp) == DateTime(2000, 2, 29, 12)
	test/ValueError ^ (lambda: DateTime(2000, 1, 1).add('millisecond', 1))

def test_date_time_roll(test):
	test/DateTime(1999, 7, 6, 12).roll('hour', 25) == DateTime(1999, 7, 6, 13)
	test/DateTime(1999, 7, 31, 23).roll('day', 1) == DateTime(1999, 7, 1, 23)
	test/DateTime(1999, 12, 6, 23, 59, 59).roll('second', 1) == DateTime(1999, 12, 6, 23, 59, 0)
	test/DateTime(1999, 12, 6, 23).roll('month', 1) == DateTime(1999, 1, 6, 23)

def test_date_time_julian_day(test):
	test/DateTime(2000, 1, 1, 11, 59, 59).julian_day == 2451544
	test/DateTime(2000, 1, 1, 12).julian_day == 2451545
	test/DateTime(2000, 1, 1, 23).mod_julian_day == 51544

def test_date_time_bounds(test):
	test/DateTime.min == DateTime(-32768, 1, 1)
	test/DateTime.max == DateTime(32767, 12, 31, 23, 59, 59)
	test/TimeOfDay.max == TimeOfDay(23, 59, 59)
	test/DateTime(1999, 7, 6).end_of_month == DateTime(1999, 7, 31, 23, 59, 59)

def test_date_time_ordering(test):
	test/DateTime(1999, 7, 6, 12) < DateTime(1999, 7, 6, 13)
	test/DateTime(1999, 7, 5, 23) < DateTime(1999, 7, 6, 0)
	test/len({DateTime(1999, 7, 6), DateTime(1999, 7, 6), DateTime(1999, 7, 7)}) == 2

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
