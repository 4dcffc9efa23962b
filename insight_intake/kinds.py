INSIGHT_TRACK = "track"
INSIGHT_IDENTIFY = "identify"
INSIGHT_PAGE = "page"

INSIGHT_KINDS = frozenset({INSIGHT_TRACK, INSIGHT_IDENTIFY, INSIGHT_PAGE})
