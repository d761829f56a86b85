"""Pure pipeline steps (resolve, extract, format) plus their orchestration."""
