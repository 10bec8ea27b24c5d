# CLI package for domlineage
"""
Read-only demo CLI.

Commands:
    domlineage run              Evaluate the sample conditions
    domlineage verdicts         One line per sample condition
    domlineage explain <n>      Witness explanation for condition n
"""
