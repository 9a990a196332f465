"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases:
- normalizer / extractor: local analysis of a filename
- resolver: canonical metadata lookup through the provider ports
- organizer: destination path computation
- placement: relocation, overwrite policy and permission cascade
- conflict_scanner: read-only collision report (--check)
- sorter / watcher: one-shot sort and live watch loop

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""
