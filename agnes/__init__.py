"""Agnes family assistant core: LLM task orchestration and action extraction."""
