identity = 'http://horology.dev/project/python/horology.time'
name = 'time'
abstract = 'Proleptic Gregorian dates, clock times, and UTC-anchored instants in hecto-nanoseconds.'
icon = '⌛'
study = 'horology'

controller = 'horology'
contact = 'mailto:maintainers@horology.dev'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
