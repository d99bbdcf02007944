"""PennyWise test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- fixtures/     : Factory fixtures producing valid entity input (loaded as a plugin).
- helpers/      : Shared assertion utilities (no tests here).

General guidance
- Domain code has no I/O; build entities through their factories, not constructors.
- Assert on returned `Result` errors rather than on log output.
- Suggested markers: unit
"""
