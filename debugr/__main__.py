from debugr.app import run

run()
