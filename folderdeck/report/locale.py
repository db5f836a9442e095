from dataclasses import dataclass


@dataclass(frozen=True)
class MessageCatalog:
    """User-facing strings for the report, the step list and result messages."""

    report_title: str
    original_file_label: str
    processed_at_label: str
    folder_count_label: str
    details_title: str
    folder_label: str
    image_count_label: str
    image_names_label: str
    notes_title: str
    notes: tuple[str, ...]
    report_marker: str
    step_labels: tuple[str, str, str, str]
    no_folders_found: str
    folders_processed: str  # formatted with {count}
    processing_error: str  # formatted with {cause}
    unknown_error: str
    missing_files: str


ENGLISH = MessageCatalog(
    report_title="=== PowerPoint Processing Report ===",
    original_file_label="Original file name",
    processed_at_label="Processed at",
    folder_count_label="Folders processed",
    details_title="=== Folder Details ===",
    folder_label="Folder",
    image_count_label="Image count",
    image_names_label="Image names",
    notes_title="=== Notes ===",
    notes=(
        "All images were extracted from the ZIP archive.",
        "All folders were analyzed and their images grouped.",
        "The presentation is ready for slide generation.",
        "This is a preliminary report: the presentation itself was not modified.",
    ),
    report_marker="processing_report",
    step_labels=(
        "Extract images from ZIP archive",
        "Analyze image folders",
        "Process PowerPoint slides",
        "Finish processing and prepare download",
    ),
    no_folders_found="no image folders found in the ZIP archive",
    folders_processed="{count} folders processed successfully",
    processing_error="processing error: {cause}",
    unknown_error="unknown error",
    missing_files="please provide both the PowerPoint file and the ZIP archive",
)

ARABIC = MessageCatalog(
    report_title="=== تقرير معالجة عرض PowerPoint ===",
    original_file_label="اسم الملف الأصلي",
    processed_at_label="تاريخ المعالجة",
    folder_count_label="عدد المجلدات المعالجة",
    details_title="=== تفاصيل المجلدات ===",
    folder_label="مجلد",
    image_count_label="عدد الصور",
    image_names_label="أسماء الصور",
    notes_title="=== ملاحظات ===",
    notes=(
        "تم استخراج جميع الصور بنجاح من ملف ZIP",
        "تم تحليل جميع المجلدات وتصنيف الصور",
        "الملف جاهز للمعالجة في PowerPoint",
        "هذا تقرير أولي: لم يتم تعديل ملف PowerPoint فعلياً",
    ),
    report_marker="تقرير_المعالجة",
    step_labels=(
        "استخراج الصور من ملف ZIP",
        "تحليل مجلدات الصور",
        "معالجة شرائح PowerPoint",
        "إنهاء المعالجة وإعداد التحميل",
    ),
    no_folders_found="لم يتم العثور على مجلدات صور في ملف ZIP",
    folders_processed="تمت معالجة {count} مجلد بنجاح",
    processing_error="خطأ في المعالجة: {cause}",
    unknown_error="خطأ غير معروف",
    missing_files="يرجى رفع كل من ملف PowerPoint وملف ZIP",
)

CATALOGS: dict[str, MessageCatalog] = {
    "en": ENGLISH,
    "ar": ARABIC,
}


def get_catalog(locale: str) -> MessageCatalog:
    catalog = CATALOGS.get(locale.lower())
    if catalog is None:
        raise ValueError(f"Unknown locale '{locale}'. Choose from: {list(CATALOGS)}")
    return catalog
