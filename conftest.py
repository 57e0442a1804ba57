"""
# Binds the &horology.test.core.Test primitives to pytest.

# Test modules written for &horology.test.engine take a single `test` parameter;
# the fixture provides it so that pytest collects and runs the same functions.
"""
import pytest

from horology.test import core

class Test(core.Test):
	"""
	# &core.Test whose fates are reported through pytest.
	"""
	__slots__ = ()

	def explicit(self):
		pytest.skip("test must be explicitly invoked in order to run")

	def skip(self, condition):
		if condition:
			pytest.skip(str(condition))

	def fail(self, cause):
		pytest.fail(str(cause))

@pytest.fixture
def test(request):
	t = Test(request.node.name, request.function)
	with t.exits:
		yield t
