from legend.cli import run

run()
