from .. import sysclock
from .. import system
from .. import types
from .. import views
from .. import measure
from .. import project

def test_now(test):
	a = sysclock.utc()
	b = sysclock.now(views.utc)
	test/isinstance(a, system.SysTime) == True
	test/a.timezone % views.utc
	test/(b - a) >= measure.Duration(0)
	test/(b - a) < measure.Duration.of(minute=5)
	test/a.year >= 2020

def test_now_local(test):
	test/sysclock.now().timezone % views.local()

def test_today(test):
	d = sysclock.today(views.utc)
	test/isinstance(d, types.Date) == True
	test/abs(d - sysclock.utc().to_date()) <= measure.Duration.of(day=1)

def test_project(test):
	test/project.version == '.'.join(map(str, project.version_info))
	test/project.name == 'time'

if __name__ == '__main__':
	import sys; from ...test import engine
	engine.execute(sys.modules[__name__])
