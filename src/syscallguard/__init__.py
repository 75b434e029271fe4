"""Guard raw syscall invocations in Go source trees for WebAssembly builds."""

__version__ = "0.1.0"
