"""Write-side commands (CQRS)."""
