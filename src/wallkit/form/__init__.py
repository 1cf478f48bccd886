"""Form components: controls, the labelled field wrapper and the form itself."""

from wallkit.form.button import Button
from wallkit.form.checkbox import Checkbox
from wallkit.form.field import FormField
from wallkit.form.file_upload import FileUpload
from wallkit.form.form import Form
from wallkit.form.input import Input
from wallkit.form.select import Select, SelectOption
from wallkit.form.textarea import Textarea

__all__ = [
    "Button",
    "Checkbox",
    "FileUpload",
    "Form",
    "FormField",
    "Input",
    "Select",
    "SelectOption",
    "Textarea",
]
