from kpt_sync.main import run

run()
