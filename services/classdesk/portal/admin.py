from django.contrib import admin
from .models import Class, ClassEnrollment, Course, Major, Section, Student, YearLevel

@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ("code", "name")
    search_fields = ("code", "name")

@admin.register(Major)
class MajorAdmin(admin.ModelAdmin):
    list_display = ("code", "name", "course")
    list_filter = ("course",)
    search_fields = ("code", "name")

@admin.register(YearLevel)
class YearLevelAdmin(admin.ModelAdmin):
    list_display = ("code", "name")

@admin.register(Section)
class SectionAdmin(admin.ModelAdmin):
    list_display = ("code", "name")
    search_fields = ("code",)

@admin.register(Class)
class ClassAdmin(admin.ModelAdmin):
    list_display = ("subject_code", "subject_name", "teacher", "major", "year_level", "section")
    list_filter = ("course", "major", "year_level")
    search_fields = ("subject_code", "subject_name")

@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = ("student_id", "last_name", "first_name", "middle_name")
    search_fields = ("student_id", "last_name", "first_name")

@admin.register(ClassEnrollment)
class ClassEnrollmentAdmin(admin.ModelAdmin):
    list_display = ("student", "classroom", "enrolled_at")
    list_filter = ("classroom__subject_code", "classroom__section")
    search_fields = ("student__student_id", "student__last_name")
