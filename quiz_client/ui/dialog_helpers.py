"""Helper functions for common dialog patterns in the quiz UI."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget


def confirm_submit_quiz(parent: QWidget, message: str) -> bool:
    """Ask the user to confirm submitting a quiz while time remains.

    Args:
        parent: Parent widget for the dialog
        message: Confirmation prompt

    Returns:
        True if user confirmed, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        "Submit Quiz",
        message,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def confirm_delete_question(parent: QWidget) -> bool:
    """Show confirmation dialog for deleting a question.

    Args:
        parent: Parent widget for the dialog

    Returns:
        True if user confirmed, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        "Confirm Delete",
        "Are you sure you want to delete this question?",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def ask_login_required(parent: QWidget, title: str, message: str) -> bool:
    """Tell the user a login is needed; returns True if they chose to log in."""
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    login_button = msg_box.addButton("Login", QMessageBox.AcceptRole)
    msg_box.addButton("Close", QMessageBox.RejectRole)
    msg_box.exec()
    return msg_box.clickedButton() is login_button


def show_error(parent: QWidget, title: str, message: str) -> None:
    """Show error dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Error message
    """
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    """Show information dialog."""
    QMessageBox.information(parent, title, message)


def show_warning(parent: QWidget, title: str, message: str) -> None:
    """Show warning dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Warning message
    """
    QMessageBox.warning(parent, title, message)
