"""
Validation results shared by the icon, SVG and CSS checks.
"""
from dataclasses import dataclass, field


@dataclass
class ValidationReport:
    """Passed checks, failed checks and warnings, in the order they ran."""

    passed: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def check(self, condition: bool, ok_message: str, fail_message: str) -> bool:
        """Record one check; returns the condition."""
        if condition:
            self.passed.append(ok_message)
        else:
            self.failed.append(fail_message)
        return condition

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def merge(self, other: "ValidationReport") -> "ValidationReport":
        self.passed.extend(other.passed)
        self.failed.extend(other.failed)
        self.warnings.extend(other.warnings)
        return self

    def lines(self) -> list[str]:
        """Console lines: passes, then failures, then warnings."""
        return (
            [f"✓ {m}" for m in self.passed]
            + [f"✗ {m}" for m in self.failed]
            + [f"⚠ {m}" for m in self.warnings]
        )

    def summary(self) -> str:
        return f"Passed: {len(self.passed)}, Failed: {len(self.failed)}, Warnings: {len(self.warnings)}"
