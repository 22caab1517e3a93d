"""
Tests for the Tracing System.
"""

from solid_switcheroo.core.tracer import TraceEventType, TraceLogger


def test_phase_nesting():
  logger = TraceLogger()

  p1 = logger.start_phase("Parent")
  logger.start_phase("Child")
  logger.end_phase()  # End Child
  logger.end_phase()  # End Parent

  events = logger.export()

  # 4 events: Start P, Start C, End C, End P
  assert len(events) == 4
  assert events[0]["type"] == TraceEventType.PHASE_START
  assert events[1]["parent_id"] == p1
  assert events[2]["type"] == TraceEventType.PHASE_END


def test_end_phase_without_start_is_ignored():
  logger = TraceLogger()
  logger.end_phase()
  assert logger.export() == []


def test_alias_and_mutation_metadata():
  logger = TraceLogger()
  phase = logger.start_phase("Rewrite")
  logger.log_alias("h", "factory")
  logger.log_mutation("call_expression", 'h("i")', "<i />")

  events = logger.export()
  alias, mutation = events[1], events[2]
  assert alias["type"] == TraceEventType.ALIAS_BINDING
  assert alias["metadata"] == {"name": "h", "role": "factory"}
  assert alias["parent_id"] == phase
  assert mutation["type"] == TraceEventType.TEXT_MUTATION
  assert mutation["description"] == "Rewrote call_expression"
  assert mutation["metadata"]["after"] == "<i />"
