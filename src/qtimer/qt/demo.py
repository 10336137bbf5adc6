from PySide6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QHBoxLayout
from PySide6.QtCore import Qt


class DemoPanel(QFrame):
    """Shows whichever timer callbacks were injected as buttons."""
    buttons = [
        ('Start', 'start_timer'),
        ('Cancel', 'cancel_timer'),
        ('Reset', 'reset_timer'),
        ('Finish', 'finish_timer'),
    ]

    def __init__(self, text='', **props):
        super().__init__()
        self.setLayout(QVBoxLayout())
        self.label = QLabel(text)
        self.label.setAlignment(Qt.AlignCenter)
        self.layout().addWidget(self.label)
        row = QHBoxLayout()
        for title, prop_name in self.buttons:
            callback = props.get(prop_name)
            if callback is None:
                continue
            button = QPushButton(title)
            button.clicked.connect(lambda _checked=False, cb=callback: cb())
            row.addWidget(button)
        self.layout().addLayout(row)
