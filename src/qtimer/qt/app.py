from PySide6.QtWidgets import QApplication, QMainWindow

from ..wrapper import with_timer
from .demo import DemoPanel
from .host import TimerHost
from .scheduler import Scheduler


def run_demo(options):
    app = QApplication([])
    window = QMainWindow()
    count = [0]

    def on_timeout(props):
        count[0] += 1
        host.set_props(text='Timer fired (%d)' % count[0])

    Panel = with_timer(delay=options.delay, on_timeout=on_timeout, options={
        'passed_props': options.passed_props,
        'start_on_mount': options.start_on_mount,
    })(DemoPanel)
    host = TimerHost(Panel, Scheduler(), text='Waiting %gs' % options.delay)
    window.setCentralWidget(host)
    window.show()
    app.exec()
    host.close()
