"""
Pipeline package for the plant image analysis service.

Contains:
- `state`  : Typed `AnalysisState` definition
- `nodes`  : LangGraph node callables operating over `AnalysisState`
- `graph`  : StateGraph builder and compiled `pipeline`
"""
