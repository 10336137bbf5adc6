from PySide6.QtWidgets import QFrame, QHBoxLayout


class TimerHost(QFrame):
    def __init__(self, wrapped_cls, scheduler=None, /, **props):
        super().__init__()
        self.setLayout(QHBoxLayout())
        self.layout().setContentsMargins(0, 0, 0, 0)
        self.node = wrapped_cls(scheduler, **props)
        self.node.attach()
        self.layout().addWidget(self.node.unit)

    @property
    def unit(self):
        return self.node.unit

    def set_props(self, **changes):
        old_unit = self.node.unit
        self.node.set_props(**changes)
        if self.node.unit is not old_unit:
            self.layout().replaceWidget(old_unit, self.node.unit)
            old_unit.deleteLater()

    def closeEvent(self, event):
        self.node.detach()
        super().closeEvent(event)
