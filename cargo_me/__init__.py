"""cargo-me: scaffold Rust crates with profile-driven metadata."""

__version__ = "0.1.0"
